from .group_classes import Category, RULES, bucket_classes, category_of, group_classes, split_classes
from .rewrite import (
    ClassifierError,
    LineRangeError,
    UnsupportedLanguageError,
    format_class_attr,
    format_code,
    rewrite_document,
)

__all__ = [
    'Category',
    'RULES',
    'bucket_classes',
    'category_of',
    'group_classes',
    'split_classes',
    'ClassifierError',
    'LineRangeError',
    'UnsupportedLanguageError',
    'format_class_attr',
    'format_code',
    'rewrite_document',
]
