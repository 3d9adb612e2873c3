"""ball-line-updown - Tap-driven chain of folding ball lines."""

from .canvas import Canvas, Paint
from .config import ViewConfig, parse_color
from .display_target import DisplayTarget
from .driver import AnimationDriver
from .node_chain import ChainNode, NodeChain
from .orchestrator import Orchestrator
from .render_buffer import RenderBuffer
from .scale_math import (divide_scale, inverse, max_scale, mirror_value,
                         scale_factor, update_value)
from .sequencer import Sequencer, TickResult
from .state import AnimationState
from .terminal_display_target import TerminalDisplayTarget
from .view import BallLineUpDownView

__all__ = [
    "BallLineUpDownView",
    "ViewConfig",
    "parse_color",
    "Sequencer",
    "TickResult",
    "NodeChain",
    "ChainNode",
    "AnimationState",
    "AnimationDriver",
    "Orchestrator",
    "Canvas",
    "Paint",
    "RenderBuffer",
    "DisplayTarget",
    "TerminalDisplayTarget",
    "inverse",
    "max_scale",
    "divide_scale",
    "scale_factor",
    "mirror_value",
    "update_value",
]
