import logging, sys, traceback
from dataclasses import dataclass
from typing import Sequence, Tuple
from .errors import LauncherError, InvocationError
from .resolver import resolve

log=logging.getLogger("launcher.run")

@dataclass(frozen=True)
class LaunchRequest:
    target: str
    arguments: Tuple[str, ...] = ()
    entry_point: str = "main"

    @classmethod
    def from_config(cls, cfg:dict, argv:Sequence[str])->"LaunchRequest":
        return cls(
            target=cfg.get("main_class") or "",
            arguments=tuple(argv),
            entry_point=cfg.get("entry_point") or "main",
        )

class EntryPointLauncher:
    """Resolve a target's entry function by name and call it with the request args."""

    def __init__(self, failure_exit_code:int=1, stream=None):
        self.failure_exit_code=failure_exit_code
        self.stream=stream

    def launch(self, request:LaunchRequest):
        """Resolve then invoke; raises LauncherError subclasses on failure.

        SystemExit and KeyboardInterrupt from the target are not wrapped.
        """
        ep=resolve(request.target, request.entry_point)
        log.debug("resolved target=%s entry=%s args=%d", ep.target, ep.name, len(request.arguments))
        try:
            ep.invoke(list(request.arguments))
        except Exception as e:
            raise InvocationError(ep.target, f"{ep.target}.{ep.name} raised {type(e).__name__}: {e}") from e

    def report(self, err:LauncherError):
        log.error("launch failed target=%s kind=%s: %s", err.target, type(err).__name__, err)
        traceback.print_exception(type(err), err, err.__traceback__, file=self.stream or sys.stderr)

    def run(self, request:LaunchRequest)->int:
        log.info("EmpireLauncher starting target=%s", request.target or "?")
        try:
            self.launch(request)
        except LauncherError as e:
            self.report(e)
            return self.failure_exit_code
        return 0

def run(target:str, argv:Sequence[str], entry_point:str="main", failure_exit_code:int=1)->int:
    return EntryPointLauncher(failure_exit_code).run(LaunchRequest(target, tuple(argv), entry_point))
