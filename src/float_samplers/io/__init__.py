"""Import definitions used for logging and for reading or writing configuration files."""

from .logging import console as console
from .logging import log_debug as log_debug
from .logging import log_info as log_info
from .yaml_utils import export_yaml_data as export_yaml_data
from .yaml_utils import load_yaml_data as load_yaml_data
