from registry_publisher.integrations.file_sink.abc import FileSink

__all__ = ["FileSink"]
