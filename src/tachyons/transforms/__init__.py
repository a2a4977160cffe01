from tachyons.transforms.classes import ClassStyleTransform, recursive_style, style_prop_pairs

__all__ = ["ClassStyleTransform", "recursive_style", "style_prop_pairs"]
