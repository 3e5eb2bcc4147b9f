"""Intermediate Representation (IR) for stat descriptions and exported gems.

Engine inputs (:class:`StatObservation`), parsed grammar blocks
(:class:`DescriptionBlock`), the raw game tables (:class:`Dataset`) and the
exported gem record (:class:`SkillData`) are Pydantic models that serialise
cleanly to/from JSON.
"""

from .dataset import Dataset, ref_id
from .skill import LevelProgression, QualityStat, SkillData
from .stats import DescriptionBlock, GroupedStats, StatObservation

__all__ = [
    # dataset
    "Dataset",
    "ref_id",
    # skill
    "LevelProgression",
    "QualityStat",
    "SkillData",
    # stats
    "DescriptionBlock",
    "GroupedStats",
    "StatObservation",
]
