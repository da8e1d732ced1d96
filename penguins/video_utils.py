import os
import shutil
import logging
import subprocess
import pygame
from tqdm import tqdm

logger = logging.getLogger(__name__)


def render_frames(driver, frames_folder, total_frames, fps):
    """
    Steps the frame driver on fixed timestamps and saves every frame.
    Returns the number of frames written.
    """
    os.makedirs(frames_folder, exist_ok=True)
    driver.start(0)

    for frame_num in tqdm(range(total_frames), desc="Rendering Frames"):
        driver.tick((frame_num + 1) * 1000 / fps)
        frame_filename = os.path.join(frames_folder, f"frame_{frame_num:05d}.png")
        pygame.image.save(driver.screen, frame_filename)

    return total_frames


def assemble_video(frame_dir, output_filename, fps):
    """
    Assembles a video from a directory of frames using FFmpeg.
    Returns True on success.
    """
    print("\nAssembling video...")
    frame_pattern = os.path.join(frame_dir, "frame_%05d.png")
    os.makedirs(os.path.dirname(output_filename) or '.', exist_ok=True)

    command = [
        'ffmpeg',
        '-framerate', str(fps),
        '-i', frame_pattern,
        '-c:v', 'libx264',
        '-r', str(fps),
        '-pix_fmt', 'yuv420p',
        '-y',
        output_filename
    ]

    try:
        subprocess.run(command, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        logger.error("FFmpeg failed with exit code %s:\n%s", e.returncode, e.stderr)
        return False
    except FileNotFoundError:
        logger.error("FFmpeg command not found. Is FFmpeg installed and in your system's PATH?")
        return False

    print(f"Video saved to: {output_filename}")
    return True


def cleanup_frames(frame_dir):
    """Deletes the frames directory and its contents."""
    print("Cleaning up temporary frame files...")
    try:
        if os.path.isdir(frame_dir):
            shutil.rmtree(frame_dir)
            logger.info("Removed temporary directory: %s", frame_dir)
    except OSError as e:
        logger.error("Error during cleanup: %s", e.strerror)
