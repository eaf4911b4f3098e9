from sdk_util_generator.infrastructure.adapters.filesystem.util_file_writer import UtilFileWriter

__all__ = ["UtilFileWriter"]
