"""Interactive read-eval-print loop for the calculator."""
from enum import Enum
import io
import sys

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from arithmetic_calculator.common.errors import InputStreamError
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.operations import OperationRequest, OperationResult
from arithmetic_calculator.session.task import EvaluationTask


class SessionState(str, Enum):
    """States of the read-eval-print loop."""

    PROMPTING = "prompting"
    READING = "reading"
    EVALUATING = "evaluating"
    TERMINATED = "terminated"


class CalculatorSession(BaseModel):
    """
    Interactive calculator session reading one calculation per line.

    Features:
        - Prints a banner and a usage hint on start.
        - Evaluates each line and prints ``Result: <value>`` or ``Error: <message>``.
        - Never stops because of a bad calculation, only on the exit command.
        - Treats an ended or unreadable input stream as fatal (InputStreamError).
    """

    # Allow arbitrary types like io.TextIOBase
    model_config = ConfigDict(arbitrary_types_allowed=True)

    input_stream: io.TextIOBase = Field(
        default_factory=lambda: sys.stdin, description="Stream calculations are read from"
    )
    output_stream: io.TextIOBase = Field(
        default_factory=lambda: sys.stdout, description="Stream outcomes are written to"
    )
    exit_command: str = Field(default="quit", description="Case-insensitive command ending the session")
    banner: str = Field(default="🧮 Welcome to Arithmetic Calculator!", description="Printed on start")
    usage_hint: str = Field(
        default="Enter calculations like: 5 + 3 or type 'quit' to exit",
        description="Printed after the banner",
    )
    prompt: str = Field(default="\nEnter your calculation:", description="Printed before each read")
    farewell: str = Field(default="Goodbye! 👋", description="Printed when the session ends")

    _state: SessionState = PrivateAttr(default=SessionState.PROMPTING)

    @field_validator("exit_command")
    def exit_command_must_not_be_blank(cls, v: str) -> str:
        """Ensure the exit command can actually be typed."""
        if not v.strip():
            raise ValueError("Exit command cannot be empty")
        return v.strip()

    @property
    def state(self) -> SessionState:
        return self._state

    def is_exit_command(self, line: str) -> bool:
        """
        Check whether a trimmed line asks to leave the session.

        :param str line: Trimmed input line

        :return: True if the line matches the exit command, ignoring case
        :rtype: bool
        """
        return line.lower() == self.exit_command.lower()

    def _write(self, text: str) -> None:
        """
        Write one line to the output stream and flush it immediately.

        :param str text: Line to write, without the trailing newline
        """
        self.output_stream.write(f"{text}\n")
        self.output_stream.flush()

    def _read_line(self) -> str:
        """
        Read one line from the input stream and strip surrounding whitespace.

        :return: Trimmed line
        :rtype: str
        :raises InputStreamError: If the stream is exhausted or cannot be read
        """
        try:
            line: str = self.input_stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputStreamError(f"Failed to read line: {exc}") from exc

        # readline() returns "" only at end of stream, an empty line is "\n"
        if not line:
            raise InputStreamError(f"Input stream closed before '{self.exit_command}' was entered")
        return line.strip()

    def _evaluate(self, line: str, iteration: int) -> OperationResult:
        """
        Evaluate one calculation line.

        :param str line: Trimmed calculation line
        :param int iteration: Loop iteration number, starting at 1

        :return: Outcome of the calculation
        :rtype: OperationResult
        """
        task = EvaluationTask(request=OperationRequest(expression=line), iteration=iteration)
        return task.run()

    def start(self) -> None:
        """
        Run the read-eval-print loop until the exit command is entered.

        Steps:
            1. Print the banner and the usage hint.
            2. Print the prompt and read one line.
            3. Stop on the exit command, otherwise evaluate the line.
            4. Print the outcome and go back to step 2.

        :return: None
        :raises InputStreamError: If the input stream ends or fails before the exit command
        :raises RuntimeError: If the session has already terminated
        """
        if self._state is SessionState.TERMINATED:
            raise RuntimeError("Session has already terminated")

        logger.info("🧮 Calculator session started")
        self._write(self.banner)
        self._write(self.usage_hint)

        iteration: int = 0
        try:
            while True:
                self._write(self.prompt)
                self._state = SessionState.READING
                line: str = self._read_line()

                if self.is_exit_command(line):
                    break

                iteration += 1
                self._state = SessionState.EVALUATING
                self._write(self._evaluate(line, iteration).render())
                self._state = SessionState.PROMPTING

        except InputStreamError as exc:
            self._state = SessionState.TERMINATED
            logger.debug(f"🔌❌ Session stopped after {iteration} calculation(s): {exc}")
            raise

        except KeyboardInterrupt:
            logger.info("🛑 Session interrupted")

        self._write(self.farewell)
        self._state = SessionState.TERMINATED
        logger.info(f"👋 Calculator session ended after {iteration} calculation(s)")
