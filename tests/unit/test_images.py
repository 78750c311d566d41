from PIL import Image

from domains.doc_ingest.processors.images import asset_target_name, process_asset
from tests._fixtures.tree_builder import make_animated_gif, write

MAX_SIZE = (1200, 1200)
IMAGE_EXTENSIONS = [".png", ".jpg", ".jpeg", ".gif", ".webp"]


def test_asset_target_name():
    assert asset_target_name("demo.gif") == "demo.webp"
    assert asset_target_name("DEMO.GIF") == "DEMO.webp"
    assert asset_target_name("photo.png") == "photo.png"


def test_large_image_is_shrunk_preserving_aspect_ratio(tmp_path):
    source = tmp_path / "src" / "wide.png"
    source.parent.mkdir()
    Image.new("RGB", (2400, 1200), "white").save(source)
    target = tmp_path / "out" / "wide.png"
    target.parent.mkdir()

    written = process_asset(source, target, MAX_SIZE, IMAGE_EXTENSIONS)

    assert written == target
    with Image.open(target) as img:
        assert img.size == (1200, 600)
        assert img.format == "PNG"


def test_small_image_is_not_upscaled(tmp_path):
    source = tmp_path / "small.jpg"
    Image.new("RGB", (100, 50), "red").save(source)
    target = tmp_path / "out.jpg"

    process_asset(source, target, MAX_SIZE, IMAGE_EXTENSIONS)

    with Image.open(target) as img:
        assert img.size == (100, 50)
        assert img.format == "JPEG"


def test_gif_is_transcoded_to_animated_webp(tmp_path):
    source = make_animated_gif(tmp_path / "src" / "demo.gif")
    target = tmp_path / "out" / "demo.gif"
    target.parent.mkdir()

    written = process_asset(source, target, MAX_SIZE, IMAGE_EXTENSIONS)

    assert written == tmp_path / "out" / "demo.webp"
    assert not target.exists()
    with Image.open(written) as img:
        assert img.format == "WEBP"
        assert img.size == (60, 40)
        assert getattr(img, "n_frames", 1) == 3


def test_non_image_asset_is_copied_verbatim(tmp_path):
    payload = b"%PDF-1.4\n\x00\x01\x02binary\xff"
    source = write(tmp_path / "manual.pdf", payload)
    target = tmp_path / "out" / "manual.pdf"
    target.parent.mkdir()

    written = process_asset(source, target, MAX_SIZE, IMAGE_EXTENSIONS)

    assert written == target
    assert target.read_bytes() == payload


def test_unreadable_image_falls_back_to_copy(tmp_path):
    source = write(tmp_path / "broken.png", b"definitely not a png")
    target = tmp_path / "out" / "broken.png"
    target.parent.mkdir()

    written = process_asset(source, target, MAX_SIZE, IMAGE_EXTENSIONS)

    assert written == target
    assert target.read_bytes() == b"definitely not a png"


def test_looping_gif_keeps_its_loop_count(tmp_path):
    source = make_animated_gif(tmp_path / "forever.gif", loop=0)

    written = process_asset(source, tmp_path / "out.gif", MAX_SIZE, IMAGE_EXTENSIONS)

    with Image.open(written) as img:
        assert img.info["loop"] == 0


def test_gif_without_loop_extension_plays_once(tmp_path):
    source = make_animated_gif(tmp_path / "once.gif", loop=None)

    written = process_asset(source, tmp_path / "out.gif", MAX_SIZE, IMAGE_EXTENSIONS)

    with Image.open(written) as img:
        assert img.info["loop"] == 1
