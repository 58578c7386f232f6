"""Road network example for adjgraph.

A small undirected road map between cities, with distances in kilometres.
Try it with the CLI:

    adjgraph info examples/cities.py
    adjgraph bfs examples/cities.py --start Lyon
    adjgraph path examples/cities.py --start Paris --end Nice
    adjgraph matrix examples/cities.py
"""

from adjgraph import Graph

# -----------------------------------------------------------------------------
# Vertices
# -----------------------------------------------------------------------------

graph: Graph[str] = Graph()

for city in ["Paris", "Lyon", "Marseille", "Nice", "Bordeaux", "Toulouse", "Ajaccio"]:
    graph.add_vertex(city)

# -----------------------------------------------------------------------------
# Roads
# -----------------------------------------------------------------------------

graph.add_edge("Paris", "Lyon", 465)
graph.add_edge("Paris", "Bordeaux", 585)
graph.add_edge("Lyon", "Marseille", 315)
graph.add_edge("Lyon", "Toulouse", 535)
graph.add_edge("Marseille", "Nice", 200)
graph.add_edge("Marseille", "Toulouse", 405)
graph.add_edge("Bordeaux", "Toulouse", 245)

# Ajaccio is on Corsica and has no road connection.
