from .check import handle_check, collect_files
from .rules import handle_rules
