import argparse
import sys
import traceback

from tqdm import tqdm

from atlas_converter import convert_path


def convert(path: str, progress_callback=None):
    """
    Entry point for embedding callers to convert an atlas file or directory.
    Returns a tuple: (success: Boolean, message: String)
    """
    def report_progress(message):
        if progress_callback:
            progress_callback(message)
        tqdm.write(message)

    try:
        # A caller-supplied callback owns the display, so no progress bar.
        summary = convert_path(path, report_progress, show_progress=progress_callback is None)
        message = summary.describe()
        report_progress(message)
        return summary.success, message
    except Exception:
        error_message = traceback.format_exc()
        report_progress(f"An error occurred during conversion: {error_message}")
        return False, error_message


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="atlas2plist",
        description="Convert Spine .atlas files into TexturePacker-style .plist files.",
    )
    parser.add_argument("path", help="An .atlas file, or a directory searched recursively for .atlas files")
    args = parser.parse_args(argv)

    success, _ = convert(args.path)
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
