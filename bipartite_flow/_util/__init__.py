from ._logging import configure_logging, log_input, make_formatter

try:
    from tomllib import loads as toml_loads
except ModuleNotFoundError:
    from tomli import loads as toml_loads
