#!/usr/bin/env python3
"""
Validation script to verify the contact sheet tool can run on this machine
"""

import os
import sys
import tempfile


def check_python_imports():
    """Verify key dependencies can be imported"""
    print("📦 Python Dependencies:")

    dependencies = [
        ("PIL", "Pillow"),
        ("cv2", "OpenCV"),
        ("numpy", "NumPy"),
        ("tqdm", "tqdm"),
    ]

    all_available = True

    for module, name in dependencies:
        try:
            __import__(module)
            print(f"   ✓ {name:35} (installed)")
        except ImportError:
            print(f"   ✗ {name:35} (NOT installed)")
            all_available = False

    print()
    return all_available


def check_fonts():
    """Report which TrueType fonts will be used for the header and labels"""
    from PIL import ImageFont
    from contact_sheet.config import FONT_CANDIDATES

    print("🔤 Fonts:")

    found = {}
    for bold, candidates in FONT_CANDIDATES.items():
        kind = "bold" if bold else "regular"
        found[kind] = None
        for candidate in candidates:
            try:
                ImageFont.truetype(candidate, 12)
            except OSError:
                continue
            found[kind] = candidate
            break
        if found[kind]:
            print(f"   ✓ {kind:35} ({found[kind]})")
        else:
            print(f"   ⚠ {kind:35} (falling back to Pillow default font)")

    print()
    return found


def check_video_roundtrip():
    """Write a tiny MJPG clip with OpenCV and read one frame back"""
    import cv2
    import numpy as np

    print("🎞  Video Decoding:")

    with tempfile.TemporaryDirectory() as tmp_dir:
        clip_path = os.path.join(tmp_dir, "probe.avi")
        writer = cv2.VideoWriter(clip_path, cv2.VideoWriter_fourcc(*"MJPG"), 5, (32, 32))
        if not writer.isOpened():
            print("   ✗ OpenCV could not create a test clip")
            print()
            return False
        for i in range(5):
            writer.write(np.full((32, 32, 3), i * 40, dtype=np.uint8))
        writer.release()

        capture = cv2.VideoCapture(clip_path)
        ok, _ = capture.read()
        capture.release()

    if ok:
        print("   ✓ OpenCV can decode frames")
    else:
        print("   ✗ OpenCV could not decode the test clip")
    print()
    return ok


def main():
    """Run all validations"""
    print("=" * 60)
    print("CONTACT SHEET - VALIDATION REPORT")
    print("=" * 60)
    print()

    imports_ok = check_python_imports()
    if not imports_ok:
        print("⚠️  Warning: Some dependencies are not installed yet.")
        print("    Run: pip install -e .")
        print()
        return 1

    check_fonts()
    decode_ok = check_video_roundtrip()

    print("=" * 60)
    print("VALIDATION SUMMARY")
    print("=" * 60)
    print()
    print("✓ All Python dependencies are available!")
    if not decode_ok:
        print("⚠ Video decoding did not work; contact sheets may come out blank")
    return 0


if __name__ == "__main__":
    sys.exit(main())
