import cv2
import numpy as np
from PIL import Image

import config


def fit_within(image, size):
    rgb = np.array(image.convert("RGB"))
    h, w = rgb.shape[:2]
    scale = size / max(h, w)
    new_w = max(1, round(w * scale))
    new_h = max(1, round(h * scale))
    interpolation = cv2.INTER_AREA if scale < 1 else cv2.INTER_LINEAR
    return cv2.resize(rgb, (new_w, new_h), interpolation=interpolation)


def rounded_mask(height, width, radius):
    mask = np.zeros((height, width), dtype=np.uint8)
    r = max(0, min(radius, height // 2, width // 2))

    cv2.rectangle(mask, (r, 0), (width - 1 - r, height - 1), 255, -1)
    cv2.rectangle(mask, (0, r), (width - 1, height - 1 - r), 255, -1)
    if r > 0:
        for cx, cy in ((r, r), (width - 1 - r, r), (r, height - 1 - r), (width - 1 - r, height - 1 - r)):
            cv2.circle(mask, (cx, cy), r, 255, -1, cv2.LINE_AA)
    return mask


def add_border(rgba, radius, width, opacity):
    h, w = rgba.shape[:2]
    outer = rounded_mask(h, w, radius)
    inner = np.zeros_like(outer)
    if h > 2 * width and w > 2 * width:
        inner[width:h - width, width:w - width] = rounded_mask(h - 2 * width, w - 2 * width, radius - width)
    ring = cv2.subtract(outer, inner).astype(np.float32) / 255.0 * opacity

    out = rgba.astype(np.float32)
    out[..., :3] = out[..., :3] * (1 - ring[..., None]) + 255.0 * ring[..., None]
    out[..., 3] = np.maximum(out[..., 3], ring * 255.0)
    return out.astype(np.uint8)


def render_image_well(image, uploaded):
    rgb = fit_within(image, config.WELL_SIZE)
    if not uploaded:
        rgb = cv2.GaussianBlur(rgb, (0, 0), config.PENDING_BLUR_RADIUS)

    h, w = rgb.shape[:2]
    rgba = np.dstack([rgb, rounded_mask(h, w, config.CORNER_RADIUS)])
    rgba = add_border(rgba, config.CORNER_RADIUS, config.BORDER_WIDTH, config.BORDER_OPACITY)
    return Image.fromarray(rgba)


def _draw_photo_glyph(canvas, size, alpha):
    """Two overlapping frames with a mountain and sun, centred on canvas."""
    h, w = canvas.shape[:2]
    x0, y0 = (w - size) // 2, (h - size) // 2
    color = (255, 255, 255, alpha)
    thickness = max(2, size // 20)

    back = (x0 + size // 5, y0 + size // 8, x0 + size, y0 + size * 3 // 4)
    cv2.rectangle(canvas, back[:2], back[2:], color, thickness, cv2.LINE_AA)

    front = (x0, y0 + size // 4, x0 + size * 4 // 5, y0 + size * 7 // 8)
    cv2.rectangle(canvas, front[:2], front[2:], color, -1, cv2.LINE_AA)

    # cut the scene out of the filled front frame
    inset = thickness + 1
    cv2.rectangle(
        canvas,
        (front[0] + inset, front[1] + inset),
        (front[2] - inset, front[3] - inset),
        (0, 0, 0, 0), -1,
    )
    fx0, fy0, fx1, fy1 = front[0] + inset, front[1] + inset, front[2] - inset, front[3] - inset
    mountain = np.array([
        [fx0, fy1],
        [fx0 + (fx1 - fx0) * 2 // 5, fy0 + (fy1 - fy0) * 2 // 5],
        [fx0 + (fx1 - fx0) * 3 // 5, fy0 + (fy1 - fy0) * 3 // 5],
        [fx0 + (fx1 - fx0) * 4 // 5, fy0 + (fy1 - fy0) // 2],
        [fx1, fy1],
    ], dtype=np.int32)
    cv2.fillPoly(canvas, [mountain], color, cv2.LINE_AA)
    sun_r = max(2, (fx1 - fx0) // 10)
    cv2.circle(canvas, (fx1 - 2 * sun_r, fy0 + 2 * sun_r), sun_r, color, -1, cv2.LINE_AA)


def render_placeholder():
    size = config.WELL_SIZE
    rgba = np.zeros((size, size, 4), dtype=np.uint8)
    rgba[..., :3] = 255
    rgba[..., 3] = (rounded_mask(size, size, config.CORNER_RADIUS).astype(np.float32) * config.PLACEHOLDER_OPACITY).astype(np.uint8)

    glyph = np.zeros_like(rgba)
    _draw_photo_glyph(glyph, config.ICON_SIZE, int(255 * config.ICON_OPACITY))
    alpha = glyph[..., 3:].astype(np.float32) / 255.0
    rgba[..., :3] = (rgba[..., :3] * (1 - alpha) + glyph[..., :3] * alpha).astype(np.uint8)
    rgba[..., 3] = np.maximum(rgba[..., 3], glyph[..., 3])
    return Image.fromarray(rgba)


def scale_for(uploaded):
    return config.UPLOADED_SCALE if uploaded else 1.0
