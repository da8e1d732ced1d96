import os
import sys
import time
import logging
import pygame

from penguins.app import build_frame_driver
from penguins.config import load_config
from penguins.errors import PenguinsError
from penguins.video_utils import render_frames, assemble_video, cleanup_frames
from penguins.viewport import Viewport


def run_recording(config_path='config.json'):
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    try:
        config = load_config(config_path)
    except PenguinsError as e:
        print(f"ERROR: {e}")
        return 1

    video_id = f"{config.video_id_prefix}_{int(time.time())}"
    run_output_dir = os.path.join(config.output_dir, video_id)
    frames_dir = os.path.join(run_output_dir, "frames")
    output_video_path = os.path.join(run_output_dir, f"video_{video_id}.mp4")

    # Off-screen rendering, no window needed.
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    try:
        viewport = Viewport(config.width, config.height)
        screen = pygame.Surface((config.width, config.height))
        driver = build_frame_driver(config, screen, viewport)

        print(f"Generating {config.total_frames} frames for video '{video_id}'...")
        print(f"Output will be saved in: {run_output_dir}")
        render_frames(driver, frames_dir, config.total_frames, config.record_fps)
    except PenguinsError as e:
        print(f"ERROR: {e}")
        return 1
    finally:
        pygame.quit()

    print("\n--- Post-Production ---")
    if assemble_video(frames_dir, output_video_path, config.record_fps):
        cleanup_frames(frames_dir)
    print("\nProcess Complete.")
    return 0


if __name__ == '__main__':
    sys.exit(run_recording(*sys.argv[1:2]))
