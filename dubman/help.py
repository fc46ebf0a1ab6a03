import subprocess

class HelpError(Exception):
    pass

def help_command(command=None, dub="dub"):
    args = [dub]
    if command:
        args.append(command)
    args.append("--help")
    return args

def help_output(command=None, dub="dub"):
    """
        the text `dub [command] --help` prints, stderr included
    """
    args = help_command(command, dub)
    try:
        result = subprocess.run(args, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True, errors="replace")
    except OSError as exc:
        raise HelpError("Error spawning {}: {}".format(repr(" ".join(args)), exc.strerror or exc)) from None
    if result.returncode and not result.stdout:
        raise HelpError("{} exited with status {}".format(repr(" ".join(args)), result.returncode))
    return result.stdout
