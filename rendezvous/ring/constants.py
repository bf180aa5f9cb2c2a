DEFAULT_WEIGHT = 1.0
