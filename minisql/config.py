"""
Configuration file for the SQL front end.
Contains all tunable parameters for scanning, parsing, and the interactive shell.
"""

# ============================================================================
# Tokenizer Configuration
# ============================================================================

# Characters skipped between tokens
WHITESPACE = ' \t\n'

# Largest integer literal accepted (unsigned 64-bit)
MAX_NUMBER = 2 ** 64 - 1

# ============================================================================
# Parser Configuration
# ============================================================================

# Length used for VARCHAR columns declared without (n)
DEFAULT_VARCHAR_LENGTH = 255

# Parser error messages include line and column numbers
PARSER_DETAILED_ERRORS = True

# Maximum SQL statement length
MAX_SQL_LENGTH = 65536  # 64KB

# ============================================================================
# REPL Configuration
# ============================================================================

# Prompt shown when a new statement starts
PROMPT = '> '

# Prompt shown while a statement is still missing its ';'
CONTINUATION_PROMPT = '-> '

# Lines that leave the shell (compared case-insensitively)
EXIT_COMMANDS = ('exit', 'quit')

BANNER = (
    'Enter SQL statements terminated by ";" to see their syntax tree.\n'
    'Type "exit" or "quit" to leave.'
)

# ============================================================================
# Debug and Logging
# ============================================================================

# Enable debug mode
DEBUG = False

# Log file location (None logs to stderr)
LOG_FILE = None

# Verbose output
VERBOSE = False

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
