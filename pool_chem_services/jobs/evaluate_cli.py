"""CLI para evaluar una lectura química sin levantar el servicio.

Ejemplo:
    python -m pool_chem_services.jobs.evaluate_cli --reading '{"ph": 7.9, "freeChlorine": 2.0}'

Exit codes: 0 ok, 1 errores estructurales, 2 cierre de piscina requerido.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from ..common.config import get_settings
from ..compliance_api.classification import UnknownChemicalError
from ..compliance_api.pipelines import (
    build_report,
    closure_from_details,
    evaluate_reading,
    get_adjustments,
    validate_chemical_reading,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CLOSURE = 2


def _load_reading(args: argparse.Namespace) -> dict:
    """Lee la lectura de --reading o --file.

    Raises:
        OSError: fichero inaccesible.
        ValueError: JSON mal formado (JSONDecodeError) o que no es un objeto.
    """
    if args.file:
        with open(args.file, "r", encoding="utf-8") as fh:
            payload = json.load(fh)
    else:
        payload = json.loads(args.reading)
    if not isinstance(payload, dict):
        raise ValueError(f"se esperaba un objeto JSON, recibido {type(payload).__name__}")
    return payload


def build_output(reading: dict) -> dict:
    details = evaluate_reading(reading)
    report = build_report(details)
    closure = closure_from_details(details)
    return {
        "overall": report.overall.value,
        "total_tests": report.total_tests,
        "passed_tests": report.passed_tests,
        "warning_tests": report.warning_tests,
        "critical_tests": report.critical_tests,
        "emergency_tests": report.emergency_tests,
        "details": [
            {
                "chemical": d.chemical.value,
                "value": d.value,
                "status": d.validation.status.value,
                "message": d.validation.message,
            }
            for d in report.details
        ],
        "recommendations": report.recommendations,
        "required_actions": report.required_actions,
        "should_close": closure.should_close,
        "closure_reasons": closure.reasons,
        "adjustments": {
            chem.value: {"action": adj.action.value, "amount": adj.amount, "unit": adj.unit}
            for chem, adj in get_adjustments(reading).items()
        },
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    p = argparse.ArgumentParser(description="Evaluate a pool chemical reading against MAHC standards")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--reading", help='JSON object, e.g. \'{"ph": 7.4}\'')
    src.add_argument("--file", help="path to a JSON file with the reading")
    args = p.parse_args(argv)

    try:
        reading = _load_reading(args)
    except (OSError, ValueError) as e:
        logger.error("No se pudo leer la lectura: %s", e)
        return EXIT_INVALID

    try:
        check = validate_chemical_reading(reading)
    except UnknownChemicalError as e:
        logger.error("Químico desconocido en la lectura: %s", e)
        return EXIT_INVALID
    if not check.is_valid:
        logger.error("Lectura inválida: %s", "; ".join(check.errors))
        print(json.dumps({"errors": check.errors, "warnings": check.warnings}, indent=2))
        return EXIT_INVALID

    output = build_output(reading)
    output["warnings"] = check.warnings
    print(json.dumps(output, indent=2, ensure_ascii=False))

    if output["should_close"]:
        logger.warning("Cierre de piscina requerido")
        return EXIT_CLOSURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
