"""Scenario pipelines for dualpush."""

from dualpush.pipelines.scenario import ScenarioPipeline

__all__ = ["ScenarioPipeline"]
