from island_runway import AirportCalculator, Island

island = Island([(0, 0), (10, 0), (10, 4), (4, 4), (4, 10), (0, 10)])
runway = AirportCalculator(island).calculate()

if runway is None:
    print("no runway fits")
else:
    (x1, y1), (x2, y2) = runway.as_tuple()
    print(f"runway ({x1:.3f}, {y1:.3f}) -> ({x2:.3f}, {y2:.3f})  length={runway.length:.4f}")
