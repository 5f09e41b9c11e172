import matplotlib

# no display during tests
matplotlib.use("Agg")
