"""
Demo of gkmeans clustering.

This example shows how to:
1. Cluster plain numbers with caller-defined distance/mean/equals
2. Cluster 2-D tensor points with the ready-made tensor operations
3. Visualize the result
"""

import torch
import matplotlib.pyplot as plt

from gkmeans import KMeans, tensor_ops, plot_clusters_2d


def cluster_numbers():
    """Two obvious groups of numbers."""
    km = KMeans([1, 2, 3, 10, 11, 12],
                distance=lambda a, b: abs(a - b),
                mean=lambda xs: sum(xs) / len(xs),
                equals=lambda a, b: a == b,
                verbose=1,
                random_state=0)
    clusters = km.calculate(2)

    for k, cluster in enumerate(clusters):
        print(f"Cluster {k}: centroid = {cluster.centroid}, members = {cluster.members}")


def generate_blob_data(n_points_per_cluster=100, centers=((0, 0), (6, 0), (3, 5)), scale=0.8):
    """Gaussian blobs around the given centers."""
    torch.manual_seed(42)

    data_list = []
    for center in centers:
        points = torch.tensor(center, dtype=torch.float32) + scale * torch.randn(n_points_per_cluster, 2)
        data_list.append(points)

    return torch.cat(data_list, dim=0)


def cluster_points():
    X = generate_blob_data()

    km = KMeans.from_ops(X, tensor_ops(atol=1e-6), verbose=2, random_state=0)
    clusters = km.calculate(3)

    print(f"Converged: {km.converged_} after {km.n_iter_} iterations")
    print(f"Seeds: {km.seed_indices_}")

    plot_clusters_2d(clusters, title="K-means with farthest-point k-means++ seeding")
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    cluster_numbers()
    cluster_points()
