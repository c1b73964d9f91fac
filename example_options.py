"""Example Boomerang player options."""

from boomerang.config.schema import UserInputs


FRAME_DIR = "assets/sequences/hero"

OPTIONS = UserInputs(
    frame_path=f"{FRAME_DIR}/hero_0001.jpg",
    frame_count=240,
    identifier="hero-boomerang",
    scroll_area="4000px",
)
