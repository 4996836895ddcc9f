from __future__ import annotations

import numpy as np

from currency_recognition import Frame, extract_dominant_colors
from currency_recognition.colors import brightness_stats, color_distances, luminance, sample_pixels

from conftest import solid_pixels


def test_single_color_frame_yields_one_bucket_with_all_samples() -> None:
    frame = Frame(solid_pixels((200, 40, 40), width=50, height=40))

    colors = extract_dominant_colors(frame, stride=10, bucket_size=20)

    assert len(colors) == 1
    assert colors[0].rgb == (200, 40, 40)
    assert colors[0].count == 200


def test_transparent_pixels_are_not_counted() -> None:
    pixels = solid_pixels((200, 40, 40), width=50, height=40)
    pixels[:20, :, 3] = 0
    frame = Frame(pixels)

    colors = extract_dominant_colors(frame, stride=10)

    assert len(colors) == 1
    assert colors[0].count == len(sample_pixels(frame, 10, 128)) == 100


def test_quantization_floors_to_bucket() -> None:
    frame = Frame(solid_pixels((133, 59, 255), width=10, height=10))

    colors = extract_dominant_colors(frame, stride=1, bucket_size=20)

    assert colors[0].rgb == (120, 40, 240)


def test_colors_ranked_by_frequency_and_limited_to_top_k() -> None:
    pixels = solid_pixels((0, 0, 0), width=100, height=1)
    palette = [(40, 0, 0), (80, 0, 0), (120, 0, 0), (160, 0, 0)]
    pixels[0, :10, :3] = palette[0]
    pixels[0, 10:40, :3] = palette[1]
    pixels[0, 40:45, :3] = palette[2]
    pixels[0, 45:47, :3] = palette[3]

    colors = extract_dominant_colors(Frame(pixels), stride=1, top_k=3)

    assert [c.rgb for c in colors] == [(0, 0, 0), (80, 0, 0), (40, 0, 0)]
    assert [c.count for c in colors] == [53, 30, 10]


def test_equal_counts_keep_sampling_order() -> None:
    pixels = solid_pixels((200, 0, 0), width=4, height=1)
    pixels[0, 2:, :3] = (0, 0, 200)

    colors = extract_dominant_colors(Frame(pixels), stride=1)

    assert [c.rgb for c in colors] == [(200, 0, 0), (0, 0, 200)]


def test_empty_frame_has_no_colors() -> None:
    frame = Frame(np.zeros((0, 10, 4), dtype=np.uint8))

    assert extract_dominant_colors(frame) == []
    assert brightness_stats(frame).mean == 0.0


def test_brightness_stats() -> None:
    pixels = solid_pixels((90, 90, 90), width=10, height=10)
    pixels[5:] = (210, 210, 210, 255)

    stats = brightness_stats(Frame(pixels), stride=1)

    assert stats.mean == 150.0
    assert stats.contrast == 60.0


def test_luminance_and_distances() -> None:
    assert luminance(np.array([[30, 60, 90, 255]], dtype=np.uint8))[0] == 60.0

    distances = color_distances(np.array([[0, 0, 0]]), np.array([[3, 4, 0], [0, 0, 0]]))
    assert distances.shape == (1, 2)
    assert distances[0, 0] == 5.0
    assert distances[0, 1] == 0.0
