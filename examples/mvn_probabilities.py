"""Example: orthant and rectangle probabilities of a 4-variate normal.

Equicorrelated standard normals with r = -0.33, the case tabulated against
R's mvtnorm package. Expected P(X1 <= q(.25), X2 <= q(.35), X3 <= 0):
0.005960125
"""

import logging
import os
import sys

import numpy as np
from scipy.stats import norm

# Add src to path for development
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from pymvnorm import MultivariateNormal, MVNControl, mvndst

logging.basicConfig(level=logging.INFO, format="%(name)s %(levelname)s: %(message)s")

r = -0.33
corr = np.full((4, 4), r)
np.fill_diagonal(corr, 1.0)

ctrl = MVNControl(max_evaluations=100_000, abs_tol=1e-5)
mvn = MultivariateNormal(np.zeros(4), corr, control=ctrl, rng=12345)

x = [norm.ppf(0.25), norm.ppf(0.35), norm.ppf(0.5), np.inf]
res = mvn.cdf_with_error(x)
print(f"P(X <= x)          = {res.value:.9f} +- {res.error:.1e} ({res.inform.name})")
print("Target              = 0.005960125")

# Rectangle on the same distribution
box = mvn.interval([-1.0, -1.0, -1.0, -1.0], [1.0, 1.0, 1.0, 1.0])
print(f"P(-1 <= X <= 1)    = {box:.6f}")

# Same rectangle through the low-level routine (correlations row by row)
rows, cols = np.tril_indices(4, k=-1)
low = mvndst(-np.ones(4), np.ones(4), [2, 2, 2, 2], corr[rows, cols],
             max_evaluations=100_000, abs_tol=1e-5, rng=1)
print(f"mvndst             = {low.value:.6f} ({low.n_evaluations} evaluations)")

# Sampling
sample = mvn.generate_random_values(10_000, seed=7)
print(f"Sample correlation = {np.corrcoef(sample, rowvar=False)[0, 1]:.3f} (target {r})")
