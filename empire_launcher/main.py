import logging, os, sys
from .config import effective, apply_env, ensure_defaults
from .errors import ConfigError
from .launcher import LaunchRequest, EntryPointLauncher

def setup_logging(level:str="INFO"):
    # stdout belongs to the launched program
    h = logging.StreamHandler(sys.stderr)
    fmt = logging.Formatter("[%(levelname)s] %(asctime)s %(name)s: %(message)s")
    h.setFormatter(fmt)
    root=logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    root.addHandler(h)

def main(argv=None, environ=None):
    args=sys.argv[1:] if argv is None else list(argv)
    env=os.environ if environ is None else environ
    try:
        cfg=effective(env)
    except ConfigError as e:
        # unreadable file: fall back to env alone for logging and exit code
        cfg=apply_env({}, env); ensure_defaults(cfg)
        setup_logging(cfg["log_level"])
        launcher=EntryPointLauncher(cfg["failure_exit_code"])
        launcher.report(e)
        sys.exit(launcher.failure_exit_code)
    setup_logging(cfg["log_level"])
    request=LaunchRequest.from_config(cfg, args)
    code=EntryPointLauncher(cfg["failure_exit_code"]).run(request)
    sys.exit(code)

if __name__=="__main__":
    main()
