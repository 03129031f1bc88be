from mediasuite.streaming.sources.base import Chunk, MediaSource
from mediasuite.streaming.sources.fetch import FetchSource
from mediasuite.streaming.sources.file import FileSource
from mediasuite.streaming.sources.segments import SegmentListSource

__all__ = ["Chunk", "MediaSource", "FileSource", "SegmentListSource", "FetchSource"]
