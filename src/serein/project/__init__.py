"""Project-on-disk format and the init/switch pipelines.

This package depends on `serein.core` and `serein.io`; core never imports it.
"""

from __future__ import annotations

from .io import ProjectArtifacts, ProjectPlan, load_project, plan_project, save_descriptors, write_project
from .workflow import InitResult, init_project, switch_project

__all__ = [
    "InitResult",
    "ProjectArtifacts",
    "ProjectPlan",
    "init_project",
    "load_project",
    "plan_project",
    "save_descriptors",
    "switch_project",
    "write_project",
]
