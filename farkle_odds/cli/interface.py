import logging
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from typing import List, Optional
from ..core.dice import Hand
from ..core.targets import TargetRoll, find_better_rolls
from ..simulation import RerollSimulator


console = Console()
error_console = Console(stderr=True)


def configure_logging(verbose: bool = False):
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=error_console, show_path=verbose)],
        force=True,
    )


class HandReportCLI:
    """Prints the score, reroll verdict and reroll odds of a hand."""

    def __init__(self, simulator: Optional[RerollSimulator] = None, output: Optional[Console] = None):
        self.simulator = simulator
        self.console = output or console

    def display_roll(self, hand: Hand):
        """Display the roll and how it scores."""
        table = Table(title="Dice Roll Results")
        table.add_column("Dice", style="cyan")
        table.add_column("Values", style="magenta")
        table.add_row("Rolled", " ".join(f"[{v}]" for v in hand.values))
        self.console.print(table)

        combinations = hand.combinations()
        if combinations:
            self.console.print("\n[green]Scoring combinations found:[/green]")
            for combo in combinations:
                self.console.print(f"  • {combo}")
        else:
            self.console.print("[red]No scoring dice![/red]")

        self.console.print(f"\n[yellow]Your roll is worth {hand.score()} points.[/yellow]")

    def display_targets(self, targets: List[TargetRoll], rounds: int):
        """Display the target hands worth chasing."""
        table = Table(title="Rolls Worth Chasing")
        table.add_column("Target", style="cyan")
        table.add_column("Score", justify="right", style="green")
        table.add_column("Need", style="magenta")
        table.add_column("Dice", justify="right")
        table.add_column("Chance", justify="right", style="yellow")
        if self.simulator:
            table.add_column("Simulated", justify="right", style="yellow")

        for target in targets:
            row = [
                escape(str(target.target)),
                str(target.score),
                " ".join(str(d) for d in target.needed),
                str(target.reroll_count),
                f"{target.chance:.2%}",
            ]
            if self.simulator:
                result = self.simulator.simulate(target.needed, target.reroll_count, num_simulations=rounds)
                row.append(f"{result.success_rate:.2%}")
            table.add_row(*row)

        self.console.print(table)

    def run(self, hand: Hand, top: int = 5, rounds: int = 100_000) -> List[TargetRoll]:
        """Report on a hand; returns the targets that were shown."""
        self.display_roll(hand)

        if hand.can_reroll():
            self.console.print("[bold green]You can roll again! Re-roll all your dice.[/bold green]")
            return []

        targets = find_better_rolls(hand)[:top]
        if not targets:
            self.console.print("[red]No reroll can improve this hand.[/red]")
            return []

        self.console.print(f"\n[cyan]Best chances to improve on {hand.score()} points:[/cyan]")
        self.display_targets(targets, rounds)
        return targets
