"""classeval — binary classification evaluation.

Confusion counts, accuracy/sensitivity/specificity/PPV/NPV, ROC curves
and AUC for models that emit predicted probabilities.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("classeval")
except PackageNotFoundError:
    # Fallback for source-only usage before installation.
    __version__ = "0.1.0"
__license__ = "Apache-2.0"
