"""End-to-end interpretation of tab notation files."""

from __future__ import annotations

import logging
from pathlib import Path

from tab_interpreter.config import InterpreterConfig
from tab_interpreter.lexer.tokenizer import Tokenizer
from tab_interpreter.renderer.parser import Parser

logger = logging.getLogger(__name__)


def interpret(source: str) -> str:
    """Tokenize and render tab notation source.

    Parameters
    ----------
    source : str
        The complete tab notation source.

    Returns
    -------
    str
        The rendered ASCII tablature.

    Raises
    ------
    TokenizeError
        If the source has lexical errors. Rendering is not attempted.
    RenderError
        If the source has invalid options blocks.
    """
    logger.info("Generating tokens...")
    tokens = Tokenizer(source).generate_tokens()

    logger.info("Generating tabs...")
    return Parser(tokens).generate_tabs()


def run(config: InterpreterConfig) -> Path:
    """Interpret the configured input file and write the tablature.

    Parameters
    ----------
    config : InterpreterConfig
        The input file to read and the output file to write.

    Returns
    -------
    Path
        The path the tablature was written to.

    Raises
    ------
    OSError
        If the input cannot be read or the output cannot be written.
    TabInterpreterError
        If the source cannot be interpreted.
    """
    logger.info(f"Reading contents from {config.input_path}.")
    source = config.input_path.read_text(encoding="utf-8")

    tabs = interpret(source)

    logger.info(f"Writing output to {config.output_path}.")
    directory = config.output_path.parent
    directory.mkdir(parents=True, exist_ok=True)
    config.output_path.write_text(tabs, encoding="utf-8")

    logger.info("Guitar tabs interpreted successfully!")
    return config.output_path
