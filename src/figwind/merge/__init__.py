from figwind.merge.classify import classify, has_variant, split_variants, utility_of
from figwind.merge.merger import merge_classes, parse_class_list

__all__ = [
    "classify",
    "has_variant",
    "split_variants",
    "utility_of",
    "merge_classes",
    "parse_class_list",
]
