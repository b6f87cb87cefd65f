from imgconv.plugins.readers import pillow_reader  # noqa: F401
from imgconv.plugins.writers import pillow_writer  # noqa: F401
