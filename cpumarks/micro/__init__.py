"""Namespace for small CPU workloads; it holds no modules yet."""