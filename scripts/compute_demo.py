import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
SRC = os.path.abspath(os.path.join(THIS_DIR, "..", "src"))
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from spine_vec.domain.points import SpinePoint
from spine_vec.engine.pipeline import compute_spine_load_vectors
from spine_vec.services.csv_io import RESULT_COLUMNS
from spine_vec.services.logging_setup import setup_logging

setup_logging()

points = [
    SpinePoint(label="C2", x=300, y=100),
    SpinePoint(label="C5", x=302, y=140),
    SpinePoint(label="T6", x=305, y=260),
    SpinePoint(label="T9", x=308, y=300),
    SpinePoint(label="L2", x=310, y=420),
    SpinePoint(label="L4", x=312, y=460),
]

res = compute_spine_load_vectors(points, "60")
if res is None:
    print("Datos insuficientes.")
    sys.exit(1)

print(" | ".join(RESULT_COLUMNS))
for row in res.rows:
    print(" | ".join(str(v) for v in row.as_list()))
print("GSV vector =", res.resultant_vector)
