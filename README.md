# trafsim

Building blocks for a traffic simulation on a square grid of tiles: a grid
of tiles with road-graph nodes, one-way roads and turns, home and office
buildings, traffic lights grouped into networks, cars that search a route
and drive it, and a clock for the simulated day.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `trafsim.vector_math`: the immutable `Vec2` vector, the axis-aligned
  `Rect` with `contains()`, `rotated_bounds()`, and the helpers `size`,
  `distance`, `dot`, `angle`, `direction_angle`, `normalize`, `rotate`,
  `lerp` and `intersection_point`. `normalize` and `angle` raise
  `ValueError` for zero-length vectors.
- `trafsim.node`: `Node`, a point in the road graph with one-way
  connections (`connect`, `disconnect`, `disconnect_all`) and a per-day
  counter of passing cars in 96 windows of 15 minutes
  (`increment_counter`, `reset_counter`; a time outside the day raises
  `IndexError`). `search_astar(start, dest)` is a depth-first search that
  tries the neighbour closest to the destination first; `search_dfs` goes
  in connection order. Both return a list of nodes, empty when the
  destination cannot be reached.
- `trafsim.tile`: the enums `TileCategory`, `NeighborIndex` and
  `RoadType`, and `Tile`, an empty map cell with a position, size, index,
  centre node and colour. `select()`, `hover()` and `unselect()` change
  its highlight.
- `trafsim.grid`: `Grid(tile_size, side_count=50)`, tiles indexed row by
  row. `tile(index)` and `tile_at(pos)` return `None` outside the grid;
  `neighbors(index)` gives up, right, down, left; `swap_tile(tile)` puts
  a tile at its own index and returns the one it replaced; `reset()`
  empties the grid.
- `trafsim.roads`: `RoadTile` and its kinds `StraightRoad`, `HomeRoad` and
  `RoadTurn`. A road has a `direction` (up is `(0, 1)`, right `(1, 0)`,
  down `(0, -1)`, left `(-1, 0)`) and a `right_turn` flag. `rotate()`
  turns it a quarter clockwise, `flip()` reverses it (and mirrors a turn),
  `auto_rotate(neighbors)` lines it up with a road leading into it, and
  `connect(neighbors)` links its node to the roads it leads into.
  `add_light` / `remove_light` attach or drop a `TrafficLight`.
- `trafsim.buildings`: `BuildingType`, `BuildingTile`, `HomeBuilding`,
  `OfficeBuilding` and `create_building(building_type, tile)`.
- `trafsim.traffic_light`: `TrafficLight`, which once activated goes
  yellow, green, yellow, red; `can_drive` is true only on green, and
  `blocker_bounds` is the area where cars stop otherwise.
- `trafsim.traffic_light_network`: `TrafficLightNetwork`, which runs its
  lights one at a time in the order they were added.
- `trafsim.car`: `Car`, which searches a route with `search_astar` and
  drives it in `update()`, stopping for cars and red lights ahead, yielding
  at shared nodes (`has_right_of_way`), and counting accidents in
  `Car.accident_count`. `direction_to_index` maps right, down, left, up to
  0 to 3.
- `trafsim.timeline`: `TimeLine`, game time in seconds with a
  `multiplier`. It calls `init_day()` on the object it is given when a day
  runs out, and `remove_cars()` when jumping ahead with `afternoon()` or
  `hop(minutes)`.
- `trafsim.rando`: `Rando`, normal (`roll`) and uniform 1..n (`uniroll`)
  random integers.
- `trafsim.csv_row`: `parse_row` and `read_rows`, comma splitting where a
  trailing comma gives a final empty cell.

## Example

```python
from trafsim.car import Car
from trafsim.grid import Grid
from trafsim.node import search_astar
from trafsim.roads import StraightRoad
from trafsim.traffic_light_network import TrafficLightNetwork

grid = Grid(tile_size=120)

# A row of straight roads heading right along row 10.
roads = []
for column in range(5, 15):
    road = StraightRoad(grid.tile(10 * grid.side_count + column))
    grid.swap_tile(road)
    roads.append(road)
for road in roads:
    road.node.disconnect_all()
    road.connect(grid.neighbors(road.index))

route = search_astar(roads[0].node, roads[-1].node)
print(len(route))

# A traffic light in its own network halfway along.
roads[5].add_light(handler_id=0, green_time=5.0)
network = TrafficLightNetwork(0)
network.add_light(roads[5].light)

car = Car(roads[0].node, roads[-1].node)
cars = [car]
game_time = 8 * 60 * 60.0
for _ in range(600):
    network.update(1 / 60)
    car.update(game_time, 1 / 60, cars, {0: network})
    if car.finished:
        break
print(car.position, car.finished)
```

`TimeLine` takes any object with `init_day()` and `remove_cars()`:

```python
from trafsim.timeline import TimeLine

class Day:
    def init_day(self):
        print("new day")

    def remove_cars(self):
        pass

timeline = TimeLine(Day())
timeline.morning()
timeline.update(90.0, simulating=True)
print(timeline.time_to_string())  # 7:1:30
```

## What the package does not do

- There is no map object tying grid, cars, light networks and buildings
  together, and no editor for laying out roads; you place tiles with
  `Grid.swap_tile` and link them with `RoadTile.connect` yourself.
- `RoadType` lists intersection, trisection and junction kinds, but the
  package has no tile classes for them, nor ready-made intersection
  layouts.
- Buildings do not send out cars on their own; you create `Car` objects.
- Maps cannot be saved to or loaded from files; `trafsim.csv_row` only
  splits lines.
- There is no window, drawing, heat map or command-line program.