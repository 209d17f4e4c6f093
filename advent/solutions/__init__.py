"""Puzzle solutions for days 1 to 14, one module per day."""