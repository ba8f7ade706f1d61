import numpy as np

from asciicam.frame import FrameBuffer


def make_frame(width, height, rgb=(0, 0, 0)):
    """Uniform opaque frame of the given colour."""
    arr = np.empty((height, width, 4), dtype=np.uint8)
    arr[:, :, :3] = rgb
    arr[:, :, 3] = 255
    return FrameBuffer(width=width, height=height, data=arr.tobytes())
