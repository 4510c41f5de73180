import argparse
import math
import os
import sys
from typing import Optional
from urllib.parse import urlparse, parse_qs
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from src.config import settings
from src.models.transcript import TranscriptResolution
from src.services.transcripts import build_resolver

console = Console()

def format_offset(offset_ms: float) -> str:
    # mm:ss of the offset; hours and sub-second precision are dropped
    if not math.isfinite(offset_ms):
        return "--:--"
    total = int(offset_ms // 1000)
    m = (total // 60) % 60
    s = total % 60
    return f"{m:02d}:{s:02d}"

def extract_video_id(value) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip().strip('`').strip('"').strip("'").strip()
    if not value:
        return None
    p = urlparse(value)
    if "youtube.com" in (p.netloc or ""):
        v = (parse_qs(p.query or "").get("v") or [None])[0]
        return v or None
    if "youtu.be" in (p.netloc or ""):
        vid = (p.path or "").strip("/").split("/")[0]
        return vid or None
    return value

def to_markdown(resolution: TranscriptResolution) -> str:
    lines = [f"# Transcript for Video ID: {resolution.video_id}", ""]
    for entry in resolution.entries or []:
        lines.append(f"- `{format_offset(entry.offset)}` {entry.text}")
    return "\n".join(lines)

def render_resolution(resolution: TranscriptResolution):
    video_id = escape(resolution.video_id)
    if resolution.failed:
        console.print(Panel(
            f"Could not fetch transcript for video ID: {video_id}. An error occurred during fetching or processing.",
            title="Error", border_style="red"))
        return
    if resolution.is_empty:
        console.print(Panel(
            f"No transcript could be found for video ID: {video_id}.\n"
            "This might be because the video ID is invalid, the video is private, "
            "or it simply doesn't have captions/transcript.",
            title="No Transcript Available", border_style="yellow"))
        return

    table = Table(title=f"Transcript for Video ID: {video_id}", show_header=True, header_style="bold magenta")
    table.add_column("Time", style="cyan", width=7)
    table.add_column("Text", style="white")
    for entry in resolution.entries:
        table.add_row(format_offset(entry.offset), escape(entry.text))
    console.print(table)

def save_resolution(resolution: TranscriptResolution) -> str:
    output_dir = os.path.join(settings.OUTPUT_DIR, resolution.video_id)
    os.makedirs(output_dir, exist_ok=True)
    with open(os.path.join(output_dir, "transcript.json"), "w", encoding="utf-8") as f:
        f.write(resolution.model_dump_json(indent=2))
    with open(os.path.join(output_dir, "transcript.md"), "w", encoding="utf-8") as f:
        f.write(to_markdown(resolution))
    return output_dir

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Show the transcript of a YouTube video")
    # positional id/URL or --v, either one
    parser.add_argument("video", nargs="?", help="Video ID or watch URL")
    parser.add_argument("--v", dest="v", help="Video ID or watch URL")
    parser.add_argument("--json", action="store_true", help="Print the resolution as JSON")
    parser.add_argument("--save", action="store_true", help=f"Save transcript.json and transcript.md under {settings.OUTPUT_DIR}/")
    parser.add_argument("--no-cache", action="store_true", help="Bypass the transcript cache for this run")

    args = parser.parse_args(argv)

    video_id = extract_video_id(args.v or args.video)
    if not video_id:
        console.print(Panel("Please provide a video ID, like: transcript-viewer --v VIDEO_ID", title="Missing Video ID", border_style="red"))
        return 2

    try:
        resolver = build_resolver(use_cache=not args.no_cache)
        with console.status("Fetching transcript..."):
            resolution = resolver.resolve(video_id)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        return 1

    if args.json:
        console.print_json(resolution.model_dump_json())
    else:
        render_resolution(resolution)

    if args.save and not resolution.failed:
        output_dir = save_resolution(resolution)
        console.print(f"\n[blue]Saved output to {output_dir}[/blue]")

    return 1 if resolution.failed else 0

if __name__ == "__main__":
    sys.exit(main())
