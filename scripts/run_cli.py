import argparse
import os
import sys
import traceback

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
SRC = os.path.abspath(os.path.join(THIS_DIR, "..", "src"))
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from spine_vec.domain.config import DEFAULT_WEIGHT_KG
from spine_vec.engine.pipeline import INSUFFICIENT_DATA_MESSAGE, compute_spine_load_vectors
from spine_vec.services.csv_io import read_coordinates_csv, results_to_csv_text, write_results_csv
from spine_vec.services.logging_setup import setup_logging

logger = setup_logging()


def _excepthook(exctype, value, tb):
    msg = "".join(traceback.format_exception(exctype, value, tb))
    logger.error("Excepción no capturada:\n%s", msg)
    sys.__excepthook__(exctype, value, tb)


sys.excepthook = _excepthook


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Vectores de carga sobre la curva de la columna.")
    ap.add_argument("coordinates", help="CSV de coordenadas (Level, X, Y)")
    ap.add_argument("--weight", default=str(DEFAULT_WEIGHT_KG), help="peso del paciente en kg")
    ap.add_argument("--out", default=None, help="CSV de salida (si no, se imprime)")
    args = ap.parse_args(argv)

    points = read_coordinates_csv(args.coordinates)
    res = compute_spine_load_vectors(points, args.weight)
    if res is None:
        print(INSUFFICIENT_DATA_MESSAGE, file=sys.stderr)
        return 1

    if args.out:
        write_results_csv(args.out, res.rows)
    else:
        sys.stdout.write(results_to_csv_text(res.rows))
    return 0


if __name__ == "__main__":
    sys.exit(main())
