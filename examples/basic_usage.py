"""
Basic CaptionKit usage example.

Demonstrates downloading a transcript for one video with the default
watch-page locator.
"""

import logging

from captionkit import TranscriptConfig, TranscriptDownloader, CaptionKitError

# Configure logging to see captionkit internal logs
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

def main():
    config = TranscriptConfig(video_url="https://www.youtube.com/watch?v=dQw4w9WgXcQ")
    downloader = TranscriptDownloader(output_dir="local/transcripts")
    
    try:
        path = downloader.run(config)
    except CaptionKitError as e:
        print(f"Failed during '{e.stage}': {e}")
        return
    
    print(f"Transcript saved to: {path}")

if __name__ == "__main__":
    main()
