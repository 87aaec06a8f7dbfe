"""PMLB data loading utilities."""

from __future__ import annotations

from pmlb import fetch_data

from id3.dataset import Instance
from scripts.data.loading import FeatureEncoder, records_to_instances


def load_pmlb(
    name: str,
    *,
    local_cache_dir: str = ".cache",
) -> tuple[list[Instance], FeatureEncoder]:
    """
    Fetch a PMLB dataset as ID3 instances.

    Every feature column is treated as categorical. Labels are binarized
    one-vs-rest with the minority class as positive.

    Args:
        name: Name of the PMLB dataset to fetch, e.g. "mushroom"
        local_cache_dir: Directory PMLB caches downloads in

    Returns:
        Tuple of (instances, encoder)
    """
    frame = fetch_data(name, local_cache_dir=local_cache_dir)
    minority_label = frame["target"].value_counts().idxmin()
    return records_to_instances(
        frame.astype(str),
        "target",
        positive=str(minority_label),
        missing=None,
    )
