"""
Example of uploading every image in a directory
"""

from pathlib import Path
from imageupload import UploadConfig, batch_upload


def main():
    photo_dir = Path("./photos")

    if not photo_dir.exists():
        print(f"Error: Directory {photo_dir} not found")
        print("Please create a 'photos' directory with some images")
        return

    images = sorted(photo_dir.glob("*.jpg")) + sorted(photo_dir.glob("*.png"))

    if not images:
        print(f"No images found in {photo_dir}")
        return

    config = UploadConfig(
        naming_strategy="random",
        suffix_thumbnails=False,
        dimensions={"thumb": [200, 200, True], "large": [1600]},
    )

    print(f"Found {len(images)} images")
    print("=" * 60)

    def on_progress(current, total, result):
        if result.success:
            print(f"[{current}/{total}] ✓ {result.original_filename} -> {result.filename}")
            for key in result.thumbnail_errors:
                print(f"           thumbnail {key} skipped")
        else:
            print(f"[{current}/{total}] ✗ {result.original_filename}: {result.error}")

    results = batch_upload(images, config, path="batch/", progress_callback=on_progress)

    print("=" * 60)
    successful = [r for r in results if r.success]
    thumbnails = sum(len(r.dimensions) for r in successful)

    print(f"\nResults:")
    print(f"  Successful: {len(successful)}")
    print(f"  Failed:     {len(results) - len(successful)}")
    print(f"  Thumbnails: {thumbnails}")


if __name__ == "__main__":
    main()
