from visualizer.classification.base import BaseClassifier
from visualizer.classification.classifier import ContentClassifier
from visualizer.classification.models import ClassificationResult

__all__ = ["BaseClassifier", "ClassificationResult", "ContentClassifier"]
