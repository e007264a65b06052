# Stream classifiers

from tinyknn.core.classifiers.base import BaseStreamClassifier
from tinyknn.core.classifiers.knn import KNNClassifier

__all__ = ['BaseStreamClassifier', 'KNNClassifier']
