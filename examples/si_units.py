"""Ion-ion energy, potential and field of two ions 2.3 nm apart, in kJ/mol."""

import numpy as np

from coulombpy import units
from coulombpy.medium import VACUUM, Medium
from coulombpy.pairwise import Plain, ion_field, ion_ion_energy, ion_potential


temperature = 298.15
medium = Medium(VACUUM, temperature)
bjerrum = medium.bjerrum_length()  # angstrom
scheme = Plain.without_cutoff()

z1, z2 = 1.0, 2.0
r = 23.0  # angstrom

energy = units.kt_to_kjmol(bjerrum * ion_ion_energy(scheme, z1, z2, r), temperature)
print(f"{medium}")
print(f"ion-ion energy:        {float(energy):.6f} kJ/mol")

potential = bjerrum * ion_potential(scheme, z1, r)
print(f"z2 * potential:        {float(units.kt_to_kjmol(z2 * potential, temperature)):.6f} kJ/mol")

field = bjerrum * ion_field(scheme, z1, np.array([0.0, 0.0, r]))
print(f"z2 * field * r:        {float(units.kt_to_kjmol(z2 * field[2] * r, temperature)):.6f} kJ/mol")

salty = Medium.salt_water(temperature, molarity=0.1)
print(f"{salty}: Debye length {salty.debye_length():.2f} A, Bjerrum length {salty.bjerrum_length():.2f} A")
