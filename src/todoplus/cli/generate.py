"""Generate command for creating default config."""

import logging
from pathlib import Path

import yaml

from ..models import TodoPlusConfig
from ..services.config_service import ConfigService
from .output import info, success

logger = logging.getLogger(__name__)

CONFIG_HEADER = """\
# todoplus Configuration
#
# indentation: One nesting level (spaces or a tab)
#
# symbols: Glyphs written for open, done and cancelled todos.
#   Reading also accepts -, [ ], [x], [-], x, + and friends.
#
# tags.names: Priority tags, most important first. Each name picks
#   the background color at the same position in colors.tag_backgrounds.
#
# timekeeping:
#   timestamp_format: strftime format for @created/@started/@done/@cancelled
#   finished_enabled: Write @done(...) / @cancelled(...) when finishing
#   elapsed_enabled: Fold @started time into @lasted(...) / @wasted(...)
#
# archive:
#   name: Project receiving finished todos
#   project_tag: Tag archived todos with @project(Parent.Child)
#
# file:
#   names: Todo file names searched when opening a project's todo file
#   extensions: File extensions recognized as todo files

"""


def generate_config_yaml() -> str:
    """Generate YAML config from the default TodoPlusConfig model."""
    config_dict = TodoPlusConfig.default().model_dump()
    yaml_content = yaml.dump(config_dict, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return CONFIG_HEADER + yaml_content


def run_generate(project_root: Path) -> int:
    """
    Generate default configuration.

    Args:
        project_root: Path to project root where todoplus.yml will be created

    Returns:
        Exit code (0 = success, 1 = nothing to do)
    """
    config_path = project_root / ConfigService.CONFIG_FILE

    if config_path.exists():
        info(f"Config exists: {config_path}")
        return 1

    project_root.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_config_yaml(), encoding="utf-8")
    logger.info("Generated %s", config_path)
    success(f"Generated config: {config_path}")
    return 0
