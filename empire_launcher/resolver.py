import importlib, inspect, logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional
from .errors import TypeNotFoundError, EntryPointNotFoundError

log=logging.getLogger("launcher.resolve")

@dataclass(frozen=True)
class ResolvedEntryPoint:
    target: str
    owner: Any
    name: str
    func: Callable[[List[str]], Any]

    def invoke(self, args:List[str]):
        return self.func(args)

def _check_parts(target:str, parts:List[str]):
    bad=[p for p in parts if not p.isidentifier()]
    if bad:
        raise TypeNotFoundError(target, f"malformed target name {target!r}")

def _import(modname:str, target:str):
    """Import modname; None when that module (or a parent package) does not exist."""
    try:
        return importlib.import_module(modname)
    except ModuleNotFoundError as e:
        if e.name and (modname==e.name or modname.startswith(e.name+".")):
            return None
        raise TypeNotFoundError(target, f"importing {modname} failed: {e}") from e
    except Exception as e:
        raise TypeNotFoundError(target, f"importing {modname} failed: {e!r}") from e

def _walk(obj, attrs:List[str], target:str):
    for a in attrs:
        try:
            obj=getattr(obj, a)
        except AttributeError as e:
            raise TypeNotFoundError(target, f"{target}: no attribute {a!r} on {getattr(obj,'__name__',obj)!r}") from e
    if not (inspect.ismodule(obj) or inspect.isclass(obj)):
        raise TypeNotFoundError(target, f"{target} is not a module or class ({type(obj).__name__})")
    return obj

def resolve_type(target:Optional[str]):
    """Resolve a dotted name (or module:attr form) to a module or class.

    Without a colon the longest importable module prefix wins and the rest is
    looked up as attributes, so 'demo.App' imports demo and returns demo.App.
    """
    if not isinstance(target, str) or not target.strip():
        raise TypeNotFoundError(target or "", "no target configured (set EMPIRELAUNCHER_MAIN_CLASS)")
    target=target.strip()
    if ":" in target:
        modname, _, rest = target.partition(":")
        parts=modname.split("."); attrs=rest.split(".") if rest else []
        _check_parts(target, parts+attrs)
        mod=_import(modname, target)
        if mod is None:
            raise TypeNotFoundError(target, f"no module named {modname!r}")
        return _walk(mod, attrs, target)
    parts=target.split(".")
    _check_parts(target, parts)
    for i in range(len(parts), 0, -1):
        modname=".".join(parts[:i])
        mod=_import(modname, target)
        if mod is not None:
            log.debug("imported module=%s for target=%s", modname, target)
            return _walk(mod, parts[i:], target)
    raise TypeNotFoundError(target, f"no module named {parts[0]!r}")

def resolve_entry_point(owner, target:str, name:str="main")->ResolvedEntryPoint:
    if not isinstance(name, str) or not name.isidentifier():
        raise EntryPointNotFoundError(target, f"bad entry point name {name!r} for {target}")
    func=getattr(owner, name, None)
    if func is None or not callable(func) or inspect.isclass(func):
        raise EntryPointNotFoundError(target, f"{target} has no callable {name!r}")
    if inspect.isclass(owner):
        # plain functions on a class need an instance
        raw=inspect.getattr_static(owner, name, None)
        if inspect.isfunction(raw):
            raise EntryPointNotFoundError(target, f"{target}.{name} is an instance method; make it a staticmethod or classmethod")
    try:
        sig=inspect.signature(func)
    except (TypeError, ValueError):
        sig=None
    if sig is not None:
        try:
            sig.bind([])
        except TypeError as e:
            raise EntryPointNotFoundError(target, f"{target}.{name}{sig} does not take a single argument list") from e
    return ResolvedEntryPoint(target=target, owner=owner, name=name, func=func)

def resolve(target:Optional[str], name:str="main")->ResolvedEntryPoint:
    owner=resolve_type(target)
    return resolve_entry_point(owner, target.strip(), name)
