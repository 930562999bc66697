"""Plot S(q) and dS/dq for a handful of truncation schemes."""

import numpy as np
import matplotlib.pyplot as plt

from coulombpy.pairwise import Poisson, ReactionField, RealSpaceEwald, Wolf, Yukawa, fanourgakis


cutoff = 12.0
schemes = {
    "Wolf, alpha=0.1": Wolf(cutoff=cutoff, alpha=0.1),
    "Ewald, alpha=0.2": RealSpaceEwald(cutoff=cutoff, alpha=0.2),
    "Fanourgakis": fanourgakis(cutoff),
    "Stenqvist, debye=20": Poisson.from_alias("stenqvist", cutoff=cutoff, debye_length=20.0),
    "Reaction field": ReactionField(cutoff=cutoff, epsr=1.0, epsrf=80.0),
    "Yukawa, shifted": Yukawa(cutoff=cutoff, debye_length=8.0, shifted=True),
}

q = np.linspace(0.0, 1.0, 300)
fig, (ax0, ax1) = plt.subplots(1, 2, figsize=(10, 4))
for label, scheme in schemes.items():
    ax0.plot(q, scheme.short_range_f0(q), label=label)
    ax1.plot(q, scheme.short_range_f1(q), label=label)

ax0.set_xlabel(r"$q = r / r_c$")
ax0.set_ylabel(r"$S(q)$")
ax1.set_xlabel(r"$q = r / r_c$")
ax1.set_ylabel(r"$dS/dq$")
for ax in (ax0, ax1):
    ax.grid(alpha=0.3)
ax0.legend(fontsize=8)
plt.tight_layout()
plt.show()
