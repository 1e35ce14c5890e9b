"""
Tests for path normalization in AuroraSync Server

Tests the rel/path precedence rules, the device storage marker, and the
generated-token fallback.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from path_normalizer import NormalizeClientRel, GenerateToken


def fixed_token():
    return "token-1"


def test_rel_is_preferred():
    """Test that a non-blank rel wins and ignores the path"""
    assert NormalizeClientRel("a/b.txt", "") == "a/b.txt"
    assert NormalizeClientRel("a/b.txt", "/storage/emulated/0/Other/c.txt") == "a/b.txt"
    assert NormalizeClientRel("a\\b\\c.txt", "whatever") == "a/b/c.txt"
    assert NormalizeClientRel("///a/b.txt", "") == "a/b.txt"

    print("Rel preference tests passed")


def test_rel_result_independent_of_path():
    """Test that the result depends only on rel when rel is set"""
    paths = ["", "/x/y.txt", "C:\\Users\\me\\file.doc", "/storage/emulated/0/DCIM/p.jpg"]
    results = {NormalizeClientRel("Docs/report.pdf", p, token_factory=fixed_token) for p in paths}

    assert results == {"Docs/report.pdf"}

    print("Rel independence tests passed")


def test_device_marker_is_stripped():
    """Test marker detection on absolute device paths"""
    assert NormalizeClientRel("", "/storage/emulated/0/DCIM/photo.jpg") == "DCIM/photo.jpg"
    assert NormalizeClientRel("   ", "/STORAGE/Emulated/0/Music/song.mp3") == "Music/song.mp3"
    assert NormalizeClientRel("", "\\storage\\emulated\\0\\Download\\x.zip") == "Download/x.zip"
    assert NormalizeClientRel("", "content://storage/emulated/0/a/b") == "a/b"

    # Characters whose lowercase form is longer must not shift the cut point
    assert NormalizeClientRel("", "/İİ/storage/emulated/0/DCIM/photo.jpg") == "DCIM/photo.jpg"
    assert NormalizeClientRel("", "/İ/STORAGE/EMULATED/0/İ/x.jpg") == "İ/x.jpg"

    print("Device marker tests passed")


def test_plain_absolute_path():
    """Test paths without the marker keep every segment"""
    assert NormalizeClientRel("", "/sdcard/Pictures/a.png") == "sdcard/Pictures/a.png"
    assert NormalizeClientRel("", "relative/dir/file.txt") == "relative/dir/file.txt"
    assert NormalizeClientRel("", "C:\\data\\file.txt") == "C:/data/file.txt"

    print("Plain path tests passed")


def test_empty_inputs_use_token():
    """Test that empty rel and path never produce an empty result"""
    assert NormalizeClientRel("", "", token_factory=fixed_token) == "token-1"
    assert NormalizeClientRel(None, None, token_factory=fixed_token) == "token-1"
    assert NormalizeClientRel("  ", "  ", token_factory=fixed_token) == "token-1"

    # Default generator returns fresh, non-empty values
    first = NormalizeClientRel("", "")
    second = NormalizeClientRel("", "")
    assert first and second
    assert first != second

    print("Token fallback tests passed")


def test_fallback_name_before_token():
    """Test that the uploaded file name is used before generating a token"""
    assert NormalizeClientRel("", "", fallback_name="photo.jpg", token_factory=fixed_token) == "photo.jpg"
    assert NormalizeClientRel("", "", fallback_name="dir/photo.jpg") == "photo.jpg"
    assert NormalizeClientRel("", "", fallback_name="C:\\tmp\\photo.jpg") == "photo.jpg"

    print("Fallback name tests passed")


def test_degenerate_paths_never_empty():
    """Test rules that would otherwise yield an empty string"""
    assert NormalizeClientRel("///", "", token_factory=fixed_token) == "token-1"
    assert NormalizeClientRel("", "/storage/emulated/0", token_factory=fixed_token) == "token-1"
    assert NormalizeClientRel("", "/", fallback_name="a.txt", token_factory=fixed_token) == "a.txt"

    print("Degenerate path tests passed")


def test_generate_token_is_unique():
    """Test the default token generator"""
    tokens = {GenerateToken() for _ in range(50)}
    assert len(tokens) == 50
    assert all(tokens)


if __name__ == "__main__":
    print("Running path normalizer tests...")
    print()

    test_rel_is_preferred()
    test_rel_result_independent_of_path()
    test_device_marker_is_stripped()
    test_plain_absolute_path()
    test_empty_inputs_use_token()
    test_fallback_name_before_token()
    test_degenerate_paths_never_empty()
    test_generate_token_is_unique()

    print()
    print("All tests passed!")
