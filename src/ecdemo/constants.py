"""
These constants define the default demonstration curve y^2 = x^3 + 2x + 2 over
the prime field of order P = 17, together with a base point G of order 19 and
the sample inputs used when the command line is asked to fall back to defaults.
"""

# Default curve for the ECDH and ElGamal demonstration

# The prime modulus of the field
P: int = 17

# Curve coefficients
A: int = 2
B: int = 2

# X-coordinate of the base point G
G_x: int = 5

# Y-coordinate of the base point G
G_y: int = 1

# Private scalars of parties A and B
D_A: int = 3
D_B: int = 5

# Plaintext message
MESSAGE: int = 5
