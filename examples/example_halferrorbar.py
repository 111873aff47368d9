"""Half error bars over grouped columns.

Run from the repo root:
    python examples/example_halferrorbar.py
Writes half_errorbar_demo.png to the current directory.
"""

import pandas as pd
from plotnine import aes, geom_col, ggplot, labs, position_dodge

from halfbars import configure_logging, geom_halferrorbar

configure_logging(level="DEBUG")

df = pd.DataFrame(
    {
        "dose": [0.5, 1.0, 2.0, 0.5, 1.0, 2.0],
        "supp": ["OJ", "OJ", "OJ", "VC", "VC", "VC"],
        "length": [13.2, 22.7, 26.1, 8.0, 16.8, 26.1],
        "sd": [4.5, 3.9, 2.7, 2.7, 2.5, 4.8],
    }
)
df["upper"] = df["length"] + df["sd"]

dodge = position_dodge(width=0.4)

p = (
    ggplot(df, aes("dose", "length", fill="supp"))
    + geom_col(position=dodge, width=0.4)
    + geom_halferrorbar(aes(ymax="upper", group="supp"), position=dodge, width=0.2, color="black")
    + labs(x="Dose (mg/day)", y="Tooth length", fill="Supplement")
)

p.save("half_errorbar_demo.png", width=6, height=4, dpi=100, verbose=False)
