"""
Track selection example.

Lists the caption tracks of a video and downloads a specific one by
plugging a custom selector into YouTubeClient.
"""

from captionkit import YouTubeClient, format_transcript

def prefer_manual_tracks(tracks):
    # Fall back to the first track when every track is auto-generated
    manual = [t for t in tracks if not t.is_generated]
    return (manual or tracks)[0]

def main():
    video_id = "dQw4w9WgXcQ"
    
    with YouTubeClient(selector=prefer_manual_tracks) as client:
        for track in client.list_caption_tracks(video_id):
            print(f"{track.language_code}: {track.name} (generated={track.is_generated})")
        
        track = client.locate_caption_track(video_id)
        items = client.fetch_transcript(track.base_url)
    
    print(f"\nUsing {track.language_code} track, {len(items)} lines\n")
    print(format_transcript(items[:10]))

if __name__ == "__main__":
    main()
