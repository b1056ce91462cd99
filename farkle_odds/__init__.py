"""
Farkle Odds - score six-dice hands and work out reroll chances
"""
