import re
from typing import Dict, List

_LINE_BREAK = re.compile(r"\r?\n")
_BOM = "\ufeff"


def parse_tsv(text: str) -> List[Dict[str, str]]:
    """
    Transforme un texte TSV (ligne d'en-tête + lignes de données) en liste de dicts.
    Les lignes vides sont ignorées, les colonnes manquantes valent "".
    """
    lines = [line.replace(_BOM, "").strip() for line in _LINE_BREAK.split(text or "")]
    lines = [line for line in lines if line]
    if not lines:
        return []

    headers = [h.strip() for h in lines[0].split("\t")]
    rows: List[Dict[str, str]] = []
    for line in lines[1:]:
        cols = line.split("\t")
        rows.append({
            h: (cols[i].strip() if i < len(cols) else "")
            for i, h in enumerate(headers)
        })
    return rows
