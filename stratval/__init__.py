"""stratval: stratified holdout validation for trainable classifiers."""

__version__ = "0.1.0"
