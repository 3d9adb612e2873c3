"""Ball line up/down demo: press any key to tap, 'q' to quit."""

import argparse
import asyncio
import logging
import sys
import threading
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from ball_line_updown import (BallLineUpDownView, Orchestrator,
                              TerminalDisplayTarget, ViewConfig)


def input_thread(orchestrator, stop_event):
    """Background thread turning key presses into taps."""
    import termios
    import tty

    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        while not stop_event.is_set():
            ch = sys.stdin.read(1)
            if ch in ("q", ""):
                orchestrator.stop()
                break
            orchestrator.tap()
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def main():
    parser = argparse.ArgumentParser(description="Ball line up/down animation in the terminal")
    parser.add_argument("--width", type=int, default=64, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=96, help="Canvas height in pixels")
    parser.add_argument("--fps", type=int, default=60, help="Frame loop polling rate")
    parser.add_argument("--full-blocks", action="store_true", help="One pixel row per text row")
    parser.add_argument("--log-file", default="/tmp/ball_line_updown.log", help="Where to write debug logs")
    args = parser.parse_args()

    logging.basicConfig(
        filename=args.log_file,
        level=logging.DEBUG,
        format="%(asctime)s.%(msecs)03d - %(name)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    view = BallLineUpDownView(ViewConfig())
    orchestrator = Orchestrator(view, args.width, args.height, fps=args.fps)
    display = TerminalDisplayTarget(
        args.width, args.height, use_half_blocks=not args.full_blocks, show_logs=True
    )
    orchestrator.set_display_callback(display.display)

    stop_event = threading.Event()
    if sys.stdin.isatty():
        thread = threading.Thread(target=input_thread, args=(orchestrator, stop_event), daemon=True)
        thread.start()

    with display:
        try:
            asyncio.run(orchestrator.start_async())
        except KeyboardInterrupt:
            pass
        finally:
            stop_event.set()


if __name__ == "__main__":
    main()
