"""Experiment Toggle: login detection experiment cohort read from Settings."""

from fireproof_login.config import Settings


class ConfigExperimentToggle:
    """ExperimentToggle backed by the process configuration."""

    def __init__(self, settings: Settings):
        self._enabled = settings.login_detection_experiment_enabled

    def login_detection_experiment_enabled(self) -> bool:
        return self._enabled
