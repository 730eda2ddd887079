import enum
import os
import shutil
import signal
import subprocess
import sys


class PipelineState(enum.Enum):
    IDLE = "idle"
    STARTING = "starting"
    RUNNING = "running"
    DRAINING = "draining"
    DONE = "done"
    FAILED = "failed"


def launch(args, stdin=None, stdout=None):
    """
    Start one external command with subprocess.
    Returns: (Popen object or None, exit_code if the launch failed)
    """
    sys.stdout.flush()
    # Paths ("./run", "/bin/ls") go straight to the OS
    if os.sep not in args[0] and shutil.which(args[0]) is None:
        print(f"Error: {args[0]}: command not found")
        return None, 127
    try:
        return subprocess.Popen(args, stdin=stdin, stdout=stdout), 0
    except PermissionError:
        print(f"Error: {args[0]}: permission denied")
        return None, 126
    except FileNotFoundError:
        print(f"Error: {args[0]}: command not found")
        return None, 127
    except (OSError, ValueError) as e:
        print(f"Error: {args[0]}: {e}")
        return None, 126


def report_status(returncode):
    """Print an error for a failed child. Returns the shell-style exit code."""
    if returncode < 0:
        signum = -returncode
        try:
            name = signal.Signals(signum).name
        except ValueError:
            name = str(signum)
        print(f"Error: Command terminated by signal {name}")
        return 128 + signum
    if returncode != 0:
        print(f"Error: Command exited with status {returncode}")
    return returncode


def run_simple(tokens):
    """
    Run one external command with the shell's own stdin/stdout/stderr
    and wait for it.
    Returns: exit_code
    """
    p, exit_code = launch(tokens)
    if p is None:
        return exit_code
    return report_status(p.wait())


class Pipeline:
    """
    A chain of external commands, stage i's stdout feeding stage i+1's stdin.

    The first stdin and the last stdout/stderr belong to the shell. Every
    started stage is waited on; the last stage's status is the result.
    """

    def __init__(self, stages):
        # Blank stages ("a || b") are dropped; their neighbours are joined
        self.stages = [tokens for tokens in stages if tokens]
        self.procs = []
        self.state = PipelineState.IDLE

    def run(self):
        if not self.stages:
            self.state = PipelineState.DONE
            return 0

        self.state = PipelineState.STARTING
        exit_code = 0
        prev_stdout = None
        try:
            for idx, tokens in enumerate(self.stages):
                last = idx == len(self.stages) - 1
                p, exit_code = launch(
                    tokens,
                    stdin=prev_stdout,
                    stdout=None if last else subprocess.PIPE,
                )

                # The consumer now holds the read end; drop ours so the
                # producer gets EPIPE once the consumer exits
                if prev_stdout is not None:
                    prev_stdout.close()
                    prev_stdout = None

                if p is None:
                    self.state = PipelineState.FAILED
                    return exit_code

                self.procs.append(p)
                prev_stdout = p.stdout

            self.state = PipelineState.RUNNING
        finally:
            if prev_stdout is not None:
                prev_stdout.close()
            self._drain()

        self.state = PipelineState.DONE
        return report_status(self.procs[-1].returncode)

    def _drain(self):
        """Wait for every started stage, not only the last one"""
        if self.state is not PipelineState.FAILED:
            self.state = PipelineState.DRAINING
        for p in self.procs:
            p.wait()


def run_pipeline(stages):
    """
    Execute pipeline of commands.
    Returns: exit_code
    """
    return Pipeline(stages).run()
