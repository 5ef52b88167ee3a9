import pandas as pd
from time import perf_counter
from id3py import ID3Classifier

df = pd.DataFrame({
    "outlook":  ["sunny", "sunny", "overcast", "rainy", "rainy", "rainy", "overcast",
                 "sunny", "sunny", "rainy", "sunny", "overcast", "overcast", "rainy"],
    "temp":     [85, 80, 83, 70, 68, 65, 64, 72, 69, 75, 75, 72, 81, 71],
    "humidity": [85, 90, 86, 96, 80, 70, 65, 95, 70, 80, 70, 90, 75, 91],
    "windy":    [False, True, False, False, False, True, True,
                 False, False, False, True, True, False, True],
    "play":     ["no", "no", "yes", "yes", "yes", "no", "yes",
                 "no", "yes", "yes", "yes", "yes", "yes", "no"],
})
feats = ["outlook", "temp", "humidity", "windy"]

clf = ID3Classifier(target_name="play", tie_break="lexicographic")

t0 = perf_counter(); clf.fit(df[feats], df["play"]); print(f"fit: {perf_counter()-t0:.3f} s")
print(f"training accuracy: {clf.score(df[feats], df['play']):.2f}")
clf.print_tree()

new_days = pd.DataFrame({"outlook": ["sunny", "rainy"], "temp": [66, 70],
                         "humidity": [90, 75], "windy": [True, False]})
for answer, rule in zip(clf.predict_answer(new_days), clf.predict_rule(new_days)):
    print(f"{rule} => {answer.label} ({answer.confidence}%)")

try:
    clf.export_graphviz("weather_tree", format="dot")
except RuntimeError as e:
    print(f"Skipping Graphviz export: {e}")
