import argparse, logging, os, yaml
from .errors import ConfigError

DEFAULT_PATH="/etc/empire-launcher/config.yaml"

ENV_CONFIG="EMPIRELAUNCHER_CONFIG"
# config key -> env var that overrides it
ENV_KEYS={
    "main_class": "EMPIRELAUNCHER_MAIN_CLASS",
    "entry_point": "EMPIRELAUNCHER_ENTRY_POINT",
    "log_level": "EMPIRELAUNCHER_LOG_LEVEL",
    "failure_exit_code": "EMPIRELAUNCHER_FAILURE_EXIT_CODE",
}

log=logging.getLogger("launcher.config")

def load(path:str)->dict:
    if not path or not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data=yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(path, f"{path}: invalid YAML: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(path, f"{path}: expected a mapping, got {type(data).__name__}")
    return data

def save(path:str, data:dict):
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)

def ensure_defaults(cfg:dict):
    cfg.setdefault("main_class", None)
    if cfg["main_class"] is not None:
        cfg["main_class"]=str(cfg["main_class"])
    if cfg.get("entry_point") in (None, ""):
        cfg["entry_point"]="main"
    cfg["entry_point"]=str(cfg["entry_point"])
    if not cfg.get("log_level"):
        cfg["log_level"]="INFO"
    try:
        cfg["failure_exit_code"]=int(cfg.get("failure_exit_code", 1))
    except (TypeError, ValueError):
        log.warning("bad failure_exit_code=%r, using 1", cfg.get("failure_exit_code"))
        cfg["failure_exit_code"]=1

def apply_env(cfg:dict, environ=None)->dict:
    env=os.environ if environ is None else environ
    for key, var in ENV_KEYS.items():
        val=env.get(var)
        if val not in (None, ""):
            cfg[key]=val
    return cfg

def effective(environ=None, path:str=None)->dict:
    """File config (path or $EMPIRELAUNCHER_CONFIG) overlaid by env, with defaults."""
    env=os.environ if environ is None else environ
    cfg=load(path if path is not None else env.get(ENV_CONFIG, ""))
    apply_env(cfg, env)
    ensure_defaults(cfg)
    return cfg

def show(path):
    cfg=effective(path=path)
    print("=== Config ===")
    print(yaml.safe_dump(cfg, sort_keys=False))

def init(path):
    cfg=load(path); ensure_defaults(cfg)
    save(path, cfg)
    print(f"[ok] wrote defaults to {path}")

def main():
    p=argparse.ArgumentParser(prog="empire_launcher.config")
    p.add_argument("--show", nargs="?", const=DEFAULT_PATH)
    p.add_argument("--init", nargs="?", const=DEFAULT_PATH, help="Write a config file with defaults")
    args=p.parse_args()
    path=(args.show or args.init)
    if not path: p.error("need command")
    try:
        if args.show: show(path)
        elif args.init:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            init(path)
    except ConfigError as e:
        p.error(str(e))

if __name__=="__main__":
    main()
