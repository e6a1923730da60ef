from .transform_mode import TransformMode
from .project_config import ProjectConfig, CONFIG_FILE_NAME
from .linker import link
from .project import compile, transform, validate_paths, load_config
