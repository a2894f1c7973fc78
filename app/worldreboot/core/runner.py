"""World regeneration runs.

run() is the host-independent entry point: it takes a configuration
snapshot and a world container directory and empties each configured
world folder in order. regenerate() wraps it with config loading and
the optional self-disable step, for hosts that trigger a run on startup.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from worldreboot.core.config import RegenerationConfig, ensure_config, save_config
from worldreboot.core.eraser import erase_contents

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TargetOutcome:
    """Result of regenerating a single world folder.

    Attributes:
        name: Configured world folder name.
        root: Resolved folder path under the world container.
        success: Whether every entry inside the folder was deleted.
    """

    name: str
    root: Path
    success: bool


@dataclass(slots=True)
class RunSummary:
    """Outcome of a regeneration run.

    Attributes:
        outcomes: One outcome per configured target, in processing order.
        skipped: True if the run was gated off by the enabled flag.
        disabled: True if the config was self-disabled after the run.
    """

    outcomes: list[TargetOutcome] = field(default_factory=list)
    skipped: bool = False
    disabled: bool = False

    @property
    def success(self) -> bool:
        """True if no target failed."""
        return all(o.success for o in self.outcomes)

    @property
    def failed_targets(self) -> list[str]:
        """Names of targets that were not fully erased."""
        return [o.name for o in self.outcomes if not o.success]


def run(config: RegenerationConfig, base_path: Path) -> RunSummary:
    """Empty every configured world folder under base_path.

    Targets are processed sequentially in configured order. A failing
    target is logged and the loop moves on to the next one.

    Args:
        config: Configuration snapshot for this run.
        base_path: World container directory the names resolve against.

    Returns:
        RunSummary with one outcome per target.
    """
    if not config.enabled:
        logger.info("Regeneration is disabled, nothing to do")
        return RunSummary(skipped=True)

    summary = RunSummary()
    for name in config.worlds_to_regenerate:
        root = Path(base_path) / name
        logger.warning("Regenerating world: %s", name)

        success = erase_contents(root)
        if not success:
            logger.error("Failed to fully regenerate world: %s", name)

        summary.outcomes.append(TargetOutcome(name=name, root=root, success=success))

    return summary


def regenerate(base_path: Path, config_path: Path | None = None) -> RunSummary:
    """Load the config, run a regeneration and self-disable if configured.

    A missing config file is created with defaults first. Self-disable
    happens whenever the loop completed, even if some targets failed.

    Args:
        base_path: World container directory.
        config_path: Config file to use. If None, uses the default path.

    Returns:
        RunSummary of the run.

    Raises:
        ConfigError: If the config cannot be loaded or persisted.
    """
    config = ensure_config(config_path)
    summary = run(config, base_path)

    if not summary.skipped and config.disable_after_regeneration:
        logger.warning("disable_after_regeneration is true, disabling regeneration")
        save_config(config.model_copy(update={"enabled": False}), config_path)
        summary.disabled = True

    return summary
