# kinetic_text/app.py
# Description: Gallery application that shows every registered effect.
#
# Imports
import argparse
from typing import Any, Dict, List, Optional, Sequence
#
# Third-Party Imports
from loguru import logger
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Label
#
# Local Imports
from .config import get_cli_setting, get_log_file_path
from .Effects import list_available_effects
from .Effects.effect_definitions import get_all_effect_definitions
from .logging_config import configure_logging
from .Motion.motion_trigger import MotionTrigger
from .Widgets import TextEffect
#
#######################################################################################################################
#
# Classes:


def select_effects(requested: Optional[Sequence[str]] = None) -> List[str]:
    """
    Effects the gallery shows, in registry order.

    ``requested`` (or ``[gallery] active_effects`` when it is empty) filters
    the list; unknown names are logged and skipped.
    """
    available = list_available_effects()
    names = list(requested or get_cli_setting("gallery", "active_effects", []) or [])
    if not names:
        return available
    unknown = [name for name in names if name not in available]
    for name in unknown:
        logger.warning(f"Gallery: effect '{name}' is not registered, skipping")
    return [name for name in names if name in available]


class KineticTextGallery(App):
    """A scrolling list of labelled effect widgets."""

    TITLE = "kinetic_text gallery"

    CSS = """
    Screen {
        background: #0F172A;
    }
    .effect-title {
        color: #64748B;
        margin: 1 2 0 2;
    }
    TextEffect {
        margin: 0 4;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("s", "start_manual", "Start manual effects", show=True),
    ]

    def __init__(
        self,
        effects: Optional[Sequence[str]] = None,
        reduce_motion: Optional[bool] = None,
        trigger: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.effect_names = select_effects(effects)
        self.reduce_motion = reduce_motion
        self.trigger = trigger
        self.default_text = get_cli_setting("gallery", "text", "Kinetic text in motion")

    def compose(self) -> ComposeResult:
        definitions: Dict[str, Dict[str, Any]] = get_all_effect_definitions()
        with VerticalScroll(id="gallery"):
            for name in self.effect_names:
                definition = definitions.get(name, {})
                yield Label(definition.get("title", name), classes="effect-title")
                yield TextEffect(
                    name,
                    definition.get("text", self.default_text),
                    trigger=self.trigger,
                    reduce_motion=self.reduce_motion,
                    options=definition.get("options"),
                    id=f"effect-{name}",
                )
        yield Footer()

    def action_start_manual(self) -> None:
        started = [widget.effect_name for widget in self.query(TextEffect) if widget.start()]
        logger.info(f"Started manually: {', '.join(started) or 'none'}")

    def on_text_effect_started(self, message: TextEffect.Started) -> None:
        logger.debug(f"Effect '{message.text_effect.effect_name}' started")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kinetic-text", description="Animated text effects for the terminal.")
    parser.add_argument(
        "--effect",
        action="append",
        dest="effects",
        metavar="NAME",
        help="Show only this effect (repeatable). Default: [gallery] active_effects or all.",
    )
    parser.add_argument(
        "--trigger",
        choices=[trigger.value for trigger in MotionTrigger],
        help="Override every effect's start trigger.",
    )
    parser.add_argument(
        "--reduce-motion",
        action="store_true",
        default=None,
        help="Show every effect in its settled state.",
    )
    parser.add_argument("--log-level", help="Log level (default: [general] log_level).")
    parser.add_argument("--list", action="store_true", help="List registered effects and exit.")
    return parser


def main_cli_runner(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for the kinetic-text command."""
    args = build_arg_parser().parse_args(argv)

    if args.list:
        for name in list_available_effects():
            print(name)
        return

    # A full-screen TUI owns stderr, so logs only go to the file
    configure_logging(args.log_level, log_file=get_log_file_path(), console=False)
    logger.info("Starting kinetic_text gallery")
    app = KineticTextGallery(effects=args.effects, reduce_motion=args.reduce_motion, trigger=args.trigger)
    app.run()
    logger.info("kinetic_text gallery exited")


if __name__ == "__main__":
    main_cli_runner()

#
# End of app.py
#######################################################################################################################
