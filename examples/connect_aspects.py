"""
Example: Ranking Aspect Connections.

Loads the bundled Thaumcraft aspect set, records what is in stock and asks
for the best ways to link two aspects.
"""

from aspectpath import AspectPath
from aspectpath.datasets import generate_thaumcraft_aspects

def main():
    # 1. Load aspects, recipes and holdings
    # ---------------------------------------------------------
    elements, recipes, holdings = generate_thaumcraft_aspects({"Victus": 900, "Mortuus": 400, "Lux": 40})

    with AspectPath() as engine:
        engine.load(elements, recipes, holdings)

        # 2. Exactly two aspects in between
        # ---------------------------------------------------------
        print("--- Bestia -> Spiritus, 2 steps ---")
        for ranked in engine.recommend("Bestia", "Spiritus", steps=2):
            print(f"{ranked.route}: {ranked.final_weight:.4f}")

        # 3. Bounded search, as a table
        # ---------------------------------------------------------
        print("\n--- Aer -> Terra, up to 5 aspects, best 5 ---")
        table = engine.recommend_table("Aer", "Terra", max_path_length=5)
        print(table.slice(0, 5).to_pandas()[["rank", "route", "final_weight"]])

        # 4. What a compound is made of
        # ---------------------------------------------------------
        print("\n--- Machina x2 in primal aspects ---")
        print(engine.decompose({"Machina": 2}))

if __name__ == "__main__":
    main()
