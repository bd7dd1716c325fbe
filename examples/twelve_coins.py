from coinweigh import render_tree, solve_sequential

# The classic puzzle: 12 coins, one may be fake (heavier or lighter).
k, tree = solve_sequential(12)
print(render_tree(tree))
print(f"Required {k} weighings.")
