import re

from podcast_generator.modules.storage import podcast_filename, save_podcast_audio


class TestPodcastFilename:
    def test_embeds_milliseconds(self):
        assert podcast_filename(1718000000123) == "podcast-1718000000123.mp3"

    def test_uses_current_time(self):
        assert re.fullmatch(r"podcast-\d{13}\.mp3", podcast_filename())


class TestSavePodcastAudio:
    def test_creates_directory_and_writes(self, tmp_path):
        output_dir = tmp_path / "nested" / "public"
        url = save_podcast_audio(str(output_dir), b"audio")

        assert re.fullmatch(r"/podcast-\d+\.mp3", url)
        written = output_dir / url.lstrip("/")
        assert written.read_bytes() == b"audio"

    def test_existing_directory(self, tmp_path):
        url = save_podcast_audio(str(tmp_path), b"more audio")
        assert (tmp_path / url.lstrip("/")).exists()
