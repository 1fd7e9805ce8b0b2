from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .config import config

_env = Environment(
    loader=FileSystemLoader(Path(__file__).parent / "templates"),
    # Shell scripts, not markup
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_controller_script(upgrade_packages=None) -> str:
    if upgrade_packages is None:
        upgrade_packages = config["DEFAULT"].getboolean("upgrade_packages")

    return _env.get_template("controller.sh.j2").render(
        JENKINS_REPO_URL=config["DEFAULT"]["jenkins_repo_url"],
        JENKINS_KEY_URL=config["DEFAULT"]["jenkins_key_url"],
        UPGRADE_PACKAGES=upgrade_packages,
    )


def render_mac_agent_script(work_dir=None) -> str:
    return _env.get_template("mac_agent.sh.j2").render(
        AGENT_WORK_DIR=work_dir or config["DEFAULT"]["agent_work_dir"],
    )
