from id3 import logging
from id3.builder import train
from id3.classifier import ID3Classifier
from id3.dataset import Dataset, Instance
from id3.evaluation import calculate_error
from id3.pruning import reduced_error_prune
from id3.selection import (
    FeatureSelector,
    best_feature_information_gain,
    entropy,
    information_gain,
)
from id3.tree import Decision, Output, Split, classify, to_paths

__all__ = [
    "Decision",
    "Dataset",
    "FeatureSelector",
    "ID3Classifier",
    "Instance",
    "Output",
    "Split",
    "best_feature_information_gain",
    "calculate_error",
    "classify",
    "entropy",
    "information_gain",
    "reduced_error_prune",
    "to_paths",
    "train",
]
