import numpy as np


class TimeSeries:
    """
    Append-only record of reactor samples, one row per step.

    Rows stay in the order they were appended. After close() the series is
    read-only.
    """

    def __init__(self, species_keys):
        self.species_keys = tuple(species_keys)
        self._times = []
        self._temperatures = []
        self._rows = []
        self.closed = False

    def append(self, time, temperature, mole_fractions):
        if self.closed:
            raise RuntimeError("TimeSeries is closed")
        row = np.asarray(mole_fractions, dtype=float)
        if row.shape != (len(self.species_keys),):
            raise ValueError(
                f"expected {len(self.species_keys)} mole fractions, got shape {row.shape}"
            )
        self._times.append(float(time))
        self._temperatures.append(float(temperature))
        self._rows.append(row)

    def close(self):
        self.closed = True
        return self

    def __len__(self):
        return len(self._times)

    @property
    def times(self):
        return np.array(self._times)

    @property
    def temperatures(self):
        return np.array(self._temperatures)

    @property
    def mole_fractions(self):
        """(n_steps, n_species) array, columns in species_keys order."""
        if not self._rows:
            return np.zeros((0, len(self.species_keys)))
        return np.vstack(self._rows)

    def species(self, key):
        return self.mole_fractions[:, self.species_keys.index(key)]
