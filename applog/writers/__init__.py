"""Writers module - Log output sinks"""

from applog.writers.file_sink import FileSink
from applog.writers.stream_sink import StreamSink

__all__ = ["FileSink", "StreamSink"]
