from coinweigh import draw_decision_tree, solve_sequential

k, tree = solve_sequential(5)
draw_decision_tree(tree, save_path="coins5_tree.png")
print(f"{k} weighings, saved coins5_tree.png")
