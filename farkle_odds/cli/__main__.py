import click
import multiprocessing
from ..core.dice import DICE_COUNT, Hand, InvalidFace, InvalidFaceCount
from ..simulation import RerollSimulator
from .interface import HandReportCLI, configure_logging


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument('dice', nargs=-1)
@click.option('--simulate', '-s', is_flag=True, help='Cross-check the odds with a Monte Carlo simulation')
@click.option('--rounds', '-r', type=click.IntRange(min=1), default=100_000, show_default=True,
              help='Number of simulated rerolls per target')
@click.option('--workers', '-w', type=click.IntRange(min=1), default=None,
              help='Processes sharing the simulation  [default: CPU count]')
@click.option('--seed', type=int, default=None, help='Seed for the simulation')
@click.option('--top', type=click.IntRange(min=1), default=5, show_default=True,
              help='Number of target rolls to show')
@click.option('--verbose', '-v', is_flag=True, help='Log debug output to stderr')
def main(dice, simulate, rounds, workers, seed, top, verbose):
    """Score a Farkle roll and show the odds of improving it.

    DICE are the face values of the six dice in the current roll, separated by spaces.
    """
    configure_logging(verbose)

    try:
        hand = Hand.from_tokens(dice)
    except InvalidFaceCount:
        raise click.UsageError(f"Expected {DICE_COUNT} die faces as arguments.")
    except InvalidFace as e:
        raise click.UsageError(str(e))

    simulator = None
    if simulate:
        simulator = RerollSimulator(num_workers=workers or multiprocessing.cpu_count(), seed=seed)
    cli = HandReportCLI(simulator=simulator)
    cli.run(hand, top=top, rounds=rounds)


if __name__ == "__main__":
    main()
