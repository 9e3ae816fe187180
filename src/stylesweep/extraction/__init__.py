from stylesweep.extraction.classes import dialect_class_attributes, extract_class_names

__all__ = ["extract_class_names", "dialect_class_attributes"]
