"""
Simple example of using imageupload to store an image with thumbnails
"""

from pathlib import Path
from imageupload import UploadConfig, upload_image


def main():
    # Replace with actual image path
    image_path = Path("example.jpg")

    if not image_path.exists():
        print(f"Error: {image_path} not found")
        print("Please provide a valid image path")
        return

    config = UploadConfig(
        base_path="public/uploads/images",
        public_root="public",
        naming_strategy="hash",
        dimensions={
            "square": [150, 150, True],
            "medium": [800, 600],
        },
        capture_exif=True,
    )

    print(f"Uploading {image_path}...")
    print("-" * 60)

    result = upload_image(image_path, config)

    if result.success:
        print("✓ Success!\n")

        print(f"Stored as:      {result.original_filepath}")
        print(f"Public dir:     {result.original_filedir}")
        print(f"Dimensions:     {result.original_width}x{result.original_height}px")
        print(f"Size:           {result.original_filesize} bytes")

        if result.exif:
            print(f"Camera:         {result.exif.get('Make')} {result.exif.get('Model')}")

        print("\nThumbnails:")
        for key, thumb in result.dimensions.items():
            print(f"  {key:<8} {thumb.width}x{thumb.height}px  {thumb.filesize} bytes  {thumb.filepath}")

        for key, error in result.thumbnail_errors.items():
            print(f"  {key:<8} ✗ {error}")

    else:
        print(f"✗ Failed: {result.error}")


if __name__ == "__main__":
    main()
