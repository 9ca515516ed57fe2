"""Krylov subspace methods: orthogonalizers, online QR and Arnoldi iteration."""