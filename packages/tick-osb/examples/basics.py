"""Basics -- a small storyboard with two sprites.

Demonstrates:
- Creating sprites from a path, an origin and a position
- Static and dynamic events, with and without an easing
- Assembling sprites into a Storyboard and writing the .osb file

Run: python -m examples.basics [--out storyboard.osb]
"""

import argparse

from tick_osb import Easing, Layer, Origin, Sprite, Storyboard


def build() -> Storyboard:
    board = Storyboard()

    # Full-screen background anchored at the top-left corner.
    bg = Sprite(Origin.TOP_LEFT, "sb/bg.jpg", 0, 0)
    bg.append_fade(0, 1000, 0, 1)
    bg.append_fade(9000, 10000, 1, 0)
    bg.append_scale(0, 0.5)
    board.add(bg)

    # A star drifting across the screen while spinning.
    star = Sprite("sb/star.png", (-50, 240))
    star.append_move(Easing.SINE_IN_OUT, 1000, 9000, -50, 240, 690, 240)
    star.append_rotate(1000, 9000, 0, 6.283)
    star.append_fade(1000, 1)
    board.add(star, Layer.FOREGROUND)

    return board


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a small example storyboard.")
    parser.add_argument("--out", default=None, help="write the document to this .osb file")
    args = parser.parse_args()

    board = build()
    print(board.render())
    print(f"Timeline spans {board.start_time}ms to {board.end_time}ms.")

    if args.out is not None:
        target = board.save(args.out)
        print(f"Wrote {target}.")


if __name__ == "__main__":
    main()
