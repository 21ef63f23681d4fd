"""Process-wide default pipeline options."""

from __future__ import annotations

import copy

from .options import PipelineOptions

_PIPELINE_OPTIONS = PipelineOptions()


def get_pipeline_options() -> PipelineOptions:
    return copy.deepcopy(_PIPELINE_OPTIONS)


def set_pipeline_options(options: PipelineOptions) -> None:
    global _PIPELINE_OPTIONS
    _PIPELINE_OPTIONS = copy.deepcopy(options)


def reset_pipeline_options() -> None:
    set_pipeline_options(PipelineOptions())
