from .split_frame import splits_from_frame, splits_to_frame
from .split_pairing import find_pairs, unpaired

__all__ = ["find_pairs", "unpaired", "splits_to_frame", "splits_from_frame"]
