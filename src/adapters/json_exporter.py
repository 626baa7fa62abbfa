"""Exportación JSON de resultados (lookup/search/browse).

Por qué claves de MusicBrainz:
- La salida usa `sort-name`, `life-span`, etc., igual que el servicio web.
- Un fichero exportado se puede volver a cargar con
  `Artist`/`ArtistList.model_validate`.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel


def dump_model_json(model: BaseModel) -> str:
    """Serialize a model to stable, UTF-8 friendly JSON text."""

    payload = model.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_model_json(*, model: BaseModel, output_path: Path) -> Path:
    """Write `model` as JSON to `output_path`, creating parent directories."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_model_json(model), encoding="utf-8")
    return output_path
