import logging
from collections import namedtuple

import numpy as np
from sklearn.cluster import KMeans

from ..color import from_lab, lab_distance_sq, to_lab
from ..config import DEFAULT_CLUSTER_COUNT, DEFAULT_SEED

logger = logging.getLogger(__name__)

ExtractedColor = namedtuple("ExtractedColor", ["color", "weight"])

MAX_ITERATIONS = 20
CONVERGENCE_THRESHOLD = 5.0  # Total squared centroid movement, Lab units
DEDUP_THRESHOLD = 25.0  # Lab squared distance, i.e. ΔE < 5


def _relative_tolerance(pixels):
    """Translate the absolute Lab threshold into KMeans' variance-scaled tol."""
    mean_variance = float(np.mean(np.var(pixels, axis=0)))
    if mean_variance <= 0:
        return 0.0
    return CONVERGENCE_THRESHOLD / mean_variance


def _run_kmeans(pixels, k, seed):
    kmeans = KMeans(
        n_clusters=k,
        init="k-means++",
        n_init=1,
        max_iter=MAX_ITERATIONS,
        tol=_relative_tolerance(pixels),
        random_state=seed,
        algorithm="elkan" if k > 1 else "lloyd",
    )
    labels = kmeans.fit_predict(pixels)
    counts = np.bincount(labels, minlength=k)
    return kmeans.cluster_centers_, counts


def deduplicate(colors, threshold=DEDUP_THRESHOLD):
    """Merge perceptually identical colors.

    Scans left to right: a color closer than `threshold` (Lab squared
    distance) to an already kept color is dropped and its weight added to
    the kept one.
    """
    kept = []  # [color, lab, weight]
    for entry in colors:
        lab = to_lab(entry.color)
        for item in kept:
            if lab_distance_sq(item[1], lab) < threshold:
                item[2] += entry.weight
                break
        else:
            kept.append([entry.color, lab, entry.weight])
    return [ExtractedColor(color, weight) for color, _, weight in kept]


def extract_colors(pixels, k=DEFAULT_CLUSTER_COUNT, seed=DEFAULT_SEED):
    """Extract dominant colors from Lab pixels using k-means clustering.

    Args:
        pixels: (N, 3) array-like of Lab values
        k: Requested number of clusters
        seed: Random seed for centroid initialization

    Returns:
        list of ExtractedColor, sorted by weight (descending)
    """
    pixels = np.asarray(pixels, dtype=np.float64).reshape(-1, 3)
    total = len(pixels)
    if total == 0:
        return []

    # KMeans cannot place more centroids than there are distinct points
    n_distinct = len(np.unique(pixels, axis=0))
    n_clusters = max(1, min(k, n_distinct))
    if n_clusters < k:
        logger.debug("reducing k from %d to %d distinct pixels", k, n_clusters)

    centers, counts = _run_kmeans(pixels, n_clusters, seed)

    colors = [
        ExtractedColor(from_lab(center), int(count) / total)
        for center, count in zip(centers, counts)
        if count > 0
    ]
    colors = deduplicate(colors)
    colors.sort(key=lambda c: c.weight, reverse=True)
    return colors
