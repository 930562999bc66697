"""Total energy of a small ion cluster versus cutoff, with and without self energy."""

import numpy as np
import matplotlib.pyplot as plt

from coulombpy.pairwise import Multipole, Plain, Wolf, pair_energy, total_energy


rng = np.random.default_rng(7)
positions = rng.uniform(-6.0, 6.0, size=(16, 3))
charges = np.tile([1.0, -1.0], 8)
ions = [Multipole(position=p, charge=z) for p, z in zip(positions, charges)]

reference = total_energy(Plain.without_cutoff(), ions)
cutoffs = np.linspace(6.0, 40.0, 60)
pair_only = [pair_energy(Wolf(cutoff=rc, alpha=0.05), ions) for rc in cutoffs]
with_self = [total_energy(Wolf(cutoff=rc, alpha=0.05), ions) for rc in cutoffs]

plt.axhline(reference, color="k", lw=1, label="plain Coulomb")
plt.plot(cutoffs, pair_only, label="Wolf, pair sum only")
plt.plot(cutoffs, with_self, label="Wolf, with self energy")
plt.xlabel(r"cutoff ($\AA$)")
plt.ylabel(r"energy ($l_B$ units)")
plt.legend()
plt.grid(alpha=0.3)
plt.tight_layout()
plt.show()
