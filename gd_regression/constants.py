"""
Default training options and numerical constants shared by the trainers.
"""

DEFAULT_LEARNING_RATE = 0.1
DEFAULT_ITERATIONS = 1000
DEFAULT_DECISION_BOUNDARY = 0.5

# Learning-rate controller: halve after a worse epoch, grow 5% otherwise.
RATE_DECAY = 0.5
RATE_GROWTH = 1.05

# Predictions are clipped to [eps, 1 - eps] before taking logs.
CROSS_ENTROPY_EPS = 1e-12
SIGMOID_CLIP = 500.0

LOG_EVERY = 100
