import pandas as pd
import numpy as np
import time
from id3py import ID3Classifier

# Generate synthetic data
n_samples = 400
np.random.seed(42)
# Feature 1: "City" (High Cardinality - 20 categories)
cities = [f"City_{i}" for i in range(20)]
# Feature 2: "Age" (Numeric)
ages = np.random.randint(18, 70, size=n_samples)

# Assign target based on groups of cities
X_cat = np.random.choice(cities, size=n_samples)
y = []
for city, age in zip(X_cat, ages):
    city_idx = int(city.split('_')[1])
    prob = 0.8 if city_idx < 10 else 0.2
    # Add some noise/interaction with age
    if age > 50: prob += 0.1
    y.append(1 if np.random.rand() < prob else 0)

df_syn = pd.DataFrame({'City': X_cat, 'Age': ages})
y_syn = np.array(y)

print("Data Sample:")
print(df_syn.head())

clf = ID3Classifier()

print("Starting fit...")
t0 = time.time()
try:
    clf.fit(df_syn, y_syn)
    print(f"Training Time: {time.time() - t0:.4f}s")
    print(f"Leaves: {clf.tree_.n_leaves}, depth: {clf.tree_.depth}")
    print(f"Training accuracy: {clf.score(df_syn, y_syn):.3f}")
except RecursionError:
    print("Caught RecursionError!")
