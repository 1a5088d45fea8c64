"""Utility functions for league file I/O."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('pickleleague.utils')


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load a JSON file, optionally validating it against a schema.

    Args:
        path: Path to JSON file
        schema: Optional Pydantic model to validate against

    Returns:
        Parsed JSON (a schema instance if schema provided)

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If schema validation fails

    Example:
        from pickleleague.schemas import LeagueFile
        league = load_json('data/league.json', schema=LeagueFile)
    """
    path = Path(path)

    logger.debug(f'Loading JSON from: {path}')

    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f'Invalid JSON in {path}: {e.msg} at position {e.pos}')
        raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e

    if schema is None:
        return data

    try:
        validated = schema.model_validate(data)
    except ValidationError as e:
        logger.error(f'Schema validation failed for {path}: {e}')
        raise ValueError(f'Schema validation failed for {path}:\n{e}') from e

    logger.debug(f'Schema validation passed for: {path}')
    return validated


def save_json(
    path: Path | str,
    data: Any,
    indent: int = 2,
    create_dirs: bool = True,
) -> None:
    """
    Write data (plain JSON values or a Pydantic model) to a JSON file.

    Raises:
        TypeError: If data is not JSON-serializable
        OSError: If file cannot be written
    """
    path = Path(path)

    logger.debug(f'Saving JSON to: {path}')

    if create_dirs:
        path.parent.mkdir(parents=True, exist_ok=True)

    json_data = data.model_dump() if isinstance(data, BaseModel) else data

    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(json_data, f, indent=indent, ensure_ascii=False)
    except TypeError as e:
        logger.error(f'Data is not JSON-serializable: {e}')
        raise TypeError(f'Data is not JSON-serializable: {e}') from e
    except OSError as e:
        logger.error(f'Failed to write file {path}: {e}')
        raise


def validate_json_file(
    path: Path | str,
    schema: type[T],
) -> tuple[bool, str | None]:
    """
    Check a JSON file against a schema.

    Returns:
        Tuple of (is_valid, error_message); error_message is None when valid
    """
    try:
        load_json(path, schema=schema)
        return True, None
    except FileNotFoundError:
        return False, f'File not found: {path}'
    except json.JSONDecodeError as e:
        return False, f'Invalid JSON: {e.msg} at position {e.pos}'
    except ValueError as e:
        return False, str(e)
