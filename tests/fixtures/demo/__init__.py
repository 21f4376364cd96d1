"""Launch targets used by the test suite."""
CALLS = []


def main(args):
    CALLS.append(("module", args))


class App:
    @staticmethod
    def main(args):
        CALLS.append(("App", args))


class ClassEntry:
    @classmethod
    def main(cls, args):
        CALLS.append((cls.__name__, args))


class NoMain:
    pass


class InstanceMain:
    def main(self, args):
        CALLS.append(("instance", args))


class TwoArgs:
    @staticmethod
    def main(args, extra):
        CALLS.append(("two", args))


class NoArgs:
    @staticmethod
    def main():
        CALLS.append(("none", None))


class NotCallable:
    main = "main"


class Boom:
    @staticmethod
    def main(args):
        CALLS.append(("Boom", args))
        raise RuntimeError("boom: " + " ".join(args))


class Exits:
    @staticmethod
    def main(args):
        raise SystemExit(int(args[0]))


class Mutates:
    @staticmethod
    def main(args):
        args.append("extra")
        CALLS.append(("Mutates", list(args)))


entry_function = main
