# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# bayergroth.py
#
# 18.10.2026
#
# @desc: Zero-Knowledge Argument for Correctness of a Shuffle by Stephanie
#        Bayer and Jens Groth to prove that: ciphers_out[i] = ciphers_in[pi[
#        i]] + Enc_pk(O, rho[i]). Made non-interactive with a Fiat-Shamir
#        transcript over the statement and all commitments.
# ===================================================================
import logging

from DLCGT.eccwrapper import ShortPoint
from DLCGT.elements import ShuffleProof
from DLCGT.transcript import Transcript

logger = logging.getLogger(__name__)


class BayGroProver:
    """Prover in Zero-Knowledge Argument for Correctness of a Shuffle such
    that ciphers_out[i] = ciphers_in[pi[i]] + Enc_pk(O, rho[i])

    The argument commits to a = pi + 1 and b = x^a and combines
    - a product argument (Hadamard argument reduced to a zero argument and
      a single value product argument) showing that the pairs (a_i, b_i)
      are a permutation of the pairs (i, x^i), and
    - a multi-exponentiation argument showing that
      sum(b_i*ciphers_out[i]) = Enc_pk(O; -tau) + sum(x^i*ciphers_in[i-1]).
    """
    def __init__(self, params, pk, ciphers_in, ciphers_out, pi, rho,
                 rand_gen):
        """
        Args:
            params (Parameters): curve, commitment key, N = m*n
            pk (ShortPoint): public key
            ciphers_in (List[Tuple[ShortPoint, ShortPoint]]): ciphers
                before the permutation and re-masking
            ciphers_out (List[Tuple[ShortPoint, ShortPoint]]): ciphers
                after the permutation and re-masking
            pi (List[int]): permutation
            rho (List[int]): re-masking value of ciphers_out[i]
            rand_gen (RandomGenerator): randomness for the commitments
        """
        self.m = params.m
        self.n = params.n
        self.N = params.N
        assert len(pi) == len(rho) == len(ciphers_in) == len(ciphers_out) \
            == self.N

        self.curve = params.curve
        self.order = self.curve.order
        self.pubKey = pk
        self.rand_gen = rand_gen

        self.ciphers_in = list(ciphers_in)
        self.ciphers_out = list(ciphers_out)
        self.rho = rho

        self.generators_ck = params.commitment_generators
        self.pedersen = Pedersen(self.generators_ck, self.n, self.curve)
        self.transcript = statement_transcript(params, pk, ciphers_in,
                                               ciphers_out)

        # R1 (Shuffle)
        self.a = [pi[i]+1 for i in range(len(pi))]
        self.A, self.r_A, self.c_A = (None,)*3

        # R3 (Shuffle)
        self.x2 = None
        self.B, self.r_B, self.c_B = (None,)*3

        # R1 (Hadamard/Zero)
        self.y4, self.z4 = (None,)*2
        self.F, self.r_F = (None,)*2
        self.G, self.r_G, self.c_G = (None,)*3

        # R3 (Hadamard/Zero)
        self.x6, self.y6 = (None,)*2
        self.H, self.r_H = (None,) * 2
        self.H_m, self.r_H_m, self.c_H_m = (None,) * 3
        self.F_x, self.r_F_x = (None,) * 2
        self.F_0, self.r_F_0, self.c_F_0 = (None,)*3
        self.P, self.r_P, self.c_P = (None,) * 3

        # R5 (Hadamard/Zero)
        self.x8 = None
        self.f, self.r_f = (None,)*2
        self.h, self.r_h = (None,) * 2
        self.r_p = None

        # R1 (Single Value Product)
        self.g = None
        self.alpha = None
        self.delta, self.s_delta, self.c_delta = (None,) * 3
        self.gamma, self.r_gamma, self.c_gamma = (None,) * 3
        self.s_Delta, self.c_Delta = (None,)*2

        # R3 (Single Value Product)
        self.gamma_tilde, self.r_gamma_tilde = (None,) * 2
        self.alpha_tilde, self.r_alpha_tilde = (None,) * 2

        # R1 (Multi-Exponent)
        self.b_0, self.r_B0, self.c_B0 = (None,) * 3
        self.beta, self.r_beta, self.c_beta = (None,) * 3
        self.E, self.tau_k = (None,)*2

        # R3 (Multi-Exponent)
        self.b, self.r_b = (None,) * 2
        self.beta_tilde, self.r_beta_tilde = (None,) * 2
        self.tau = None

    def r1_shuffle(self):
        """Form array a to Matrix A and create Pedersen commitment c_A with
        m random values r_A

        Returns:
            List[ShortPoint]: commitment to A
        """
        self.r_A = self.rand_gen.get_random_array(self.m)

        # copy array a of size N into matrix A of size mxn
        self.A = [self.a[self.n*i: self.n*(i+1)] for i in range(self.m)]

        # pedersen commitment of A
        self.c_A = self.pedersen.commit_matrix_vector(self.A, self.r_A)

        return self.c_A

    def r3_shuffle(self, x2):
        """Create b = x2^a, form it to Matrix B and create Pedersen
        commitment c_B with m random values r_B

        Args:
            x2 (int): challenge

        Returns:
            List[ShortPoint]: commitment to B
        """
        self.x2 = x2

        self.r_B = self.rand_gen.get_random_array(self.m)

        b = [pow(self.x2, self.a[i], self.order) for i in range(self.N)]

        # copy array b of size N into matrix B of size mxn
        self.B = [b[self.n * i: self.n * (i + 1)] for i in range(self.m)]

        self.c_B = self.pedersen.commit_matrix_vector(self.B, self.r_B)

        return self.c_B

    def r1_hadamard_zero(self):
        """Product argument: calculate F = y4*A + B - z4, the partial
        Hadamard products G of the rows of F and commit to G.
        The first row of G equals the first row of F, its commitment is
        known to the verifier and not sent.

        Returns:
            List[ShortPoint]: commitments to G[1],...,G[m-1]
        """
        q = self.order
        self.F = [[(self.A[i][j] * self.y4 + self.B[i][j] - self.z4) % q
                   for j in range(self.n)] for i in range(self.m)]
        # the commitment to z4 has randomness 0
        self.r_F = [(self.r_A[i] * self.y4 + self.r_B[i]) % q
                    for i in range(self.m)]

        self.G = hadamard(self.F, self.m, self.n, q)
        self.r_G = [self.r_F[0]] + self.rand_gen.get_random_array(self.m - 1)
        self.c_G = self.pedersen.commit_matrix_vector(self.G[1:],
                                                      self.r_G[1:])

        return self.c_G

    def r3_hadamard_zero(self):
        """Calculate the commitment c_F(0), c_H(m) and c_P. P(k) is the sum
        over the bilinear map of F(i) and H(j). F and H are modified:
        F: {F_0, F(2), F(3), ... , F(m), -1}
        H: {H(1), H(2), ... , H(m-1), H, H_m}

        Returns:
            ShortPoint, ShortPoint, List[ShortPoint]: commitment to F(0),
            H(m) and P
        """
        q = self.order
        x6_array = powers(self.x6, self.m, q)

        # H(i) = x^i*G(i) for i = 1, ... , m-1
        self.H = []
        self.r_H = []
        for i in range(self.m - 1):
            self.H.append([(x6_array[i + 1] * var0) % q
                           for var0 in self.G[i]])
            self.r_H.append((x6_array[i + 1] * self.r_G[i]) % q)

        # H = sum(x^i * G(i+1)) for i = 1, ... , m-1
        var0 = [0] * self.n
        var1 = 0
        for i in range(self.m - 1):
            for j in range(self.n):
                var0[j] = (var0[j] + x6_array[i + 1] * self.G[i + 1][j]) % q
            var1 = (var1 + x6_array[i + 1] * self.r_G[i + 1]) % q
        self.H.append(var0)
        self.r_H.append(var1)

        # Pick H_m and t_H_m randomly and calculate commitment
        self.H_m = self.rand_gen.get_random_array(self.n)
        self.r_H_m = self.rand_gen.get_random_value()
        self.H.append(self.H_m)
        self.r_H.append(self.r_H_m)
        self.c_H_m = self.pedersen.commit_vector_value(self.H_m, self.r_H_m)

        # Pick F_0 and r_F_0 randomly and calculate commitment
        self.F_0 = self.rand_gen.get_random_array(self.n)
        self.r_F_0 = self.rand_gen.get_random_value()
        self.c_F_0 = self.pedersen.commit_vector_value(self.F_0, self.r_F_0)

        # Modify F: {F_0, F(2), F(3), ... , F(m), -1}
        self.F_x = [self.F_0] + self.F[1:] + [[q - 1] * self.n]
        self.r_F_x = [self.r_F_0] + self.r_F[1:] + [0]

        # Calculate P as sum over bilinear map, P(m+1) is the statement
        # sum(F(i+1) * H(i)) = 0, its commitment is com(0; 0)
        var_l = 2 * self.m + 1
        self.P = [0] * var_l
        self.r_P = self.rand_gen.get_random_array(var_l)
        for k in range(var_l):
            var0 = 0
            for i in range(self.m + 1):
                j = (self.m - k) + i
                if 0 <= j <= self.m:
                    var0 += bilinearmap(self.F_x[i], self.H[j], self.y6, q)
            self.P[k] = var0 % q

        self.r_P[self.m + 1] = 0
        self.c_P = self.pedersen.commit_vector_vector(self.P, self.r_P)

        return self.c_F_0, self.c_H_m, self.c_P

    def r5_hadamard_zero(self):
        """Calculate the answers of the zero argument

        Returns:
           List[int], int, List[int], int, int
        """
        q = self.order
        x8_v = powers(self.x8, 2 * self.m, q)

        # f = sum(F(i) * x^i) for i = 0,...,m
        self.f = [0] * self.n
        self.r_f = 0
        for i in range(self.m + 1):
            for j in range(self.n):
                self.f[j] = (self.f[j] + x8_v[i] * self.F_x[i][j]) % q
            self.r_f = (self.r_f + x8_v[i] * self.r_F_x[i]) % q

        # h = sum(x^(m-j)*H(j)) for j = 0, ... ,m
        self.h = [0] * self.n
        self.r_h = 0
        for i in range(self.m + 1):
            for j in range(self.n):
                self.h[j] = (self.h[j] + x8_v[self.m - i] * self.H[i][j]) % q
            self.r_h = (self.r_h + x8_v[self.m - i] * self.r_H[i]) % q

        # t_p = sum(x^k * t_P(k)) for k = 0, ... ,2*m
        self.r_p = sum(x8_v[k] * self.r_P[k] for k in range(2 * self.m + 1))
        self.r_p %= q

        return self.f, self.r_f, self.h, self.r_h, self.r_p

    def r1_single_value_product(self):
        """Single value argument: the product of the entries of the last
        row of G is the public target

        Returns:
            ShortPoint, ShortPoint, ShortPoint
        """
        q = self.order
        self.g = self.G[self.m-1]
        self.alpha = [self.g[0]]
        for i in range(1, self.n):
            self.alpha.append((self.alpha[i - 1] * self.g[i]) % q)

        self.gamma = self.rand_gen.get_random_array(self.n)
        self.r_gamma = self.rand_gen.get_random_value()

        self.c_gamma = self.pedersen.commit_vector_value(
            self.gamma, self.r_gamma)

        self.delta = self.rand_gen.get_random_array(self.n)
        self.delta[0] = self.gamma[0]
        self.delta[self.n - 1] = 0

        self.s_delta = self.rand_gen.get_random_value()
        self.s_Delta = self.rand_gen.get_random_value()

        var0 = [(-self.delta[i] * self.gamma[i + 1]) % q
                for i in range(self.n - 1)]
        self.c_delta = self.pedersen.commit_vector_value(var0, self.s_delta)

        var0 = []
        for i in range(self.n - 1):
            var1 = self.g[i + 1] * self.delta[i]
            var2 = self.alpha[i] * self.gamma[i + 1]
            var0.append((self.delta[i + 1] - var1 - var2) % q)

        self.c_Delta = self.pedersen.commit_vector_value(var0, self.s_Delta)

        return self.c_gamma, self.c_delta, self.c_Delta

    def r3_single_value_product(self):
        """Single value argument answers

        Returns:
            List[int], List[int], int, int
        """
        q = self.order
        self.gamma_tilde = [(self.x6 * self.g[i] + self.gamma[i]) % q
                            for i in range(self.n)]
        self.alpha_tilde = [(self.x6 * self.alpha[i] + self.delta[i]) % q
                            for i in range(self.n)]

        self.r_gamma_tilde = (self.x6 * self.r_G[self.m - 1]
                              + self.r_gamma) % q
        self.r_alpha_tilde = (self.x6 * self.s_Delta + self.s_delta) % q

        return self.gamma_tilde, self.alpha_tilde, \
            self.r_gamma_tilde, self.r_alpha_tilde

    def r1_multi_exponent(self):
        """Calculate the diagonal sums E_k, commit to B0 and Beta. E(m) is
        the statement and c_beta(m) = com(0; 0), both are not sent.

        Returns:
            ShortPoint, List[ShortPoint], List[List[ShortPoint]]
        """
        q = self.order
        self.b_0 = self.rand_gen.get_random_array(self.n)
        self.r_B0 = self.rand_gen.get_random_value()
        self.c_B0 = self.pedersen.commit_vector_value(self.b_0, self.r_B0)

        self.beta = self.rand_gen.get_random_array(2 * self.m)
        self.beta[self.m] = 0
        self.r_beta = self.rand_gen.get_random_array(2 * self.m)
        self.r_beta[self.m] = 0
        self.c_beta = self.pedersen.commit_vector_vector(
            self.beta, self.r_beta)

        # tau(m) = -sum(rho(i)*b(i)) for i = 1, ... , N
        self.tau_k = self.rand_gen.get_random_array(2 * self.m)
        var0 = 0
        for i in range(self.N):
            var0 += self.rho[i] * self.B[i // self.n][i % self.n]
        self.tau_k[self.m] = (-var0) % q

        # Form reencrypted and shuffled cards into matrix of size mxn
        c_shuffled = [self.ciphers_out[self.n * i: self.n * (i + 1)]
                      for i in range(self.m)]

        b_v = [self.b_0] + self.B

        # E_k = Enc(G*beta_k; tau_k) + sum(C'_i*b_j), j = (k-m)+i+1
        self.E = []
        for k in range(2 * self.m):
            var0 = enc_value(self.curve, self.pubKey, self.beta[k],
                             self.tau_k[k])
            for i in range(self.m):
                j = k - self.m + i + 1
                if 0 <= j <= self.m:
                    var1 = cipher_inner_product(b_v[j], c_shuffled[i],
                                                self.curve)
                    var0 = add_cipher(var0, var1, self.curve)
            self.E.append(var0)

        return self.c_B0, self.c_beta, self.E

    def r3_multi_exponent(self):
        """Calculate answers as sums over random values from last round
        using challenge x6_array = (1, x, x^2, ... , x^2m-1)^T

        Returns:
            List[int], int, int, int, int
        """
        q = self.order
        x6_array = powers(self.x6, 2 * self.m, q)

        self.b = list(self.b_0)
        self.r_b = self.r_B0
        for i in range(self.m):
            for j in range(self.n):
                self.b[j] = (self.b[j] + x6_array[i + 1] * self.B[i][j]) % q
            self.r_b = (self.r_b + x6_array[i + 1] * self.r_B[i]) % q

        self.beta_tilde = 0
        self.r_beta_tilde = 0
        self.tau = 0
        for k in range(2 * self.m):
            self.beta_tilde += x6_array[k] * self.beta[k]
            self.r_beta_tilde += x6_array[k] * self.r_beta[k]
            self.tau += x6_array[k] * self.tau_k[k]
        self.beta_tilde %= q
        self.r_beta_tilde %= q
        self.tau %= q

        return self.b, self.r_b, self.beta_tilde, self.r_beta_tilde, self.tau

    def nizk_prover(self):
        """Generate non-interactive Zero-Knowledge Argument for Correctness
        of a Shuffle, challenges are derived from the transcript

        Returns:
            ShuffleProof: proofs from all zero-knowledge arguments
        """
        transcript = self.transcript

        # R1
        self.r1_shuffle()
        transcript.append_points(b"c_A", self.c_A)

        # R2/R3
        self.r3_shuffle(transcript.challenge_scalar(b"x2"))
        transcript.append_points(b"c_B", self.c_B)

        # R4/R5
        self.y4, self.z4 = transcript.challenge_scalars(b"y4z4", 2)
        self.r1_hadamard_zero()
        self.r1_multi_exponent()
        self.r1_single_value_product()

        c_beta = drop(self.c_beta, self.m)
        E = drop(self.E, self.m)
        absorb_round5(transcript, self.c_G, self.c_B0, c_beta, E,
                      self.c_gamma, self.c_delta, self.c_Delta)

        # R6/R7
        self.x6, self.y6 = transcript.challenge_scalars(b"x6y6", 2)
        self.r3_hadamard_zero()
        self.r3_multi_exponent()
        self.r3_single_value_product()

        c_P = drop(self.c_P, self.m + 1)
        absorb_round7(transcript, self.c_F_0, self.c_H_m, c_P)

        # R8/R9
        self.x8 = transcript.challenge_scalar(b"x8")
        self.r5_hadamard_zero()

        return ShuffleProof(
            c_A=tuple(self.c_A), c_B=tuple(self.c_B), c_G=tuple(self.c_G),
            c_B0=self.c_B0, c_beta=tuple(c_beta),
            E=tuple(tuple(cipher) for cipher in E),
            c_gamma=self.c_gamma, c_delta=self.c_delta,
            c_Delta=self.c_Delta, c_F_0=self.c_F_0, c_H_m=self.c_H_m,
            c_P=tuple(c_P), b=tuple(self.b), r_b=self.r_b,
            beta_tilde=self.beta_tilde, r_beta_tilde=self.r_beta_tilde,
            tau=self.tau, gamma_tilde=tuple(self.gamma_tilde),
            alpha_tilde=tuple(self.alpha_tilde),
            r_gamma_tilde=self.r_gamma_tilde,
            r_alpha_tilde=self.r_alpha_tilde, f=tuple(self.f), r_f=self.r_f,
            h=tuple(self.h), r_h=self.r_h, r_p=self.r_p)


class BayGroVerifier:
    """Verifier in Zero-Knowledge Argument for Correctness of a Shuffle such
    that ciphers_out[i] = ciphers_in[pi[i]] + Enc_pk(O, rho[i])
    """
    def __init__(self, params, pk, ciphers_in, ciphers_out):
        """
        Args:
            params (Parameters): curve, commitment key, N = m*n
            pk (ShortPoint): public key
            ciphers_in (List[Tuple[ShortPoint, ShortPoint]]): ciphers
                before the permutation and re-masking
            ciphers_out (List[Tuple[ShortPoint, ShortPoint]]): ciphers
                after the permutation and re-masking
        """
        self.params = params
        self.m = params.m
        self.n = params.n
        self.N = params.N

        self.curve = params.curve
        self.order = self.curve.order
        self.pubKey = pk
        self.ciphers_in = list(ciphers_in)
        self.ciphers_out = list(ciphers_out)

        self.generators_ck = params.commitment_generators
        self.pedersen = Pedersen(self.generators_ck, self.n, self.curve)

        self.x2, self.y4, self.z4 = (None,)*3
        self.x6, self.y6, self.x8 = (None,)*3

        # commitments the verifier derives from the statement
        self.c_F = None
        self.c_G = None

    def well_formed(self, proof):
        """Check number and type of all proof elements

        Args:
            proof (ShuffleProof): shuffle proof

        Returns:
            bool: True if the proof has the shape given by m and n
        """
        m, n = self.m, self.n
        if not isinstance(proof, ShuffleProof):
            return False
        point_lists = ((proof.c_A, m), (proof.c_B, m), (proof.c_G, m - 1),
                       (proof.c_beta, 2 * m - 1), (proof.c_P, 2 * m))
        scalar_lists = ((proof.b, n), (proof.gamma_tilde, n),
                        (proof.alpha_tilde, n), (proof.f, n), (proof.h, n))
        points = [proof.c_B0, proof.c_gamma, proof.c_delta, proof.c_Delta,
                  proof.c_F_0, proof.c_H_m]
        scalars = [proof.r_b, proof.beta_tilde, proof.r_beta_tilde,
                   proof.tau, proof.r_gamma_tilde, proof.r_alpha_tilde,
                   proof.r_f, proof.r_h, proof.r_p]

        for values, size in point_lists:
            if len(values) != size:
                return False
            points.extend(values)
        for values, size in scalar_lists:
            if len(values) != size:
                return False
            scalars.extend(values)
        if len(proof.E) != 2 * m - 1:
            return False
        for cipher in proof.E:
            if len(cipher) != 2:
                return False
            points.extend(cipher)

        if not all(isinstance(var0, ShortPoint) and self.curve.isoncurve(var0)
                   for var0 in points):
            return False
        return all(isinstance(var0, int) and 0 <= var0 < self.order
                   for var0 in scalars)

    def r4_verify_multi_exponent(self, proof):
        """Verify c_B0+sum(c_B(i)*x^i) = com_ck(b; r_b),
        sum(c_beta(k)*x^k) = com_ck(beta_tilde; r_beta_tilde) and
        sum(E_k*x^k) = Enc_pk(G*beta_tilde; tau) + sum(C'_i*(x^(m-i)*b))
        with E(m) = sum(x^i * ciphers_in[i-1])

        Args:
            proof (ShuffleProof): shuffle proof

        Returns:
            bool: True if verification successful, False else
        """
        q = self.order
        curve = self.curve
        x6_array = powers(self.x6, 2 * self.m, q)
        verification = True

        ped = self.pedersen.commit_vector_value(proof.b, proof.r_b)
        ver = proof.c_B0
        for i in range(self.m):
            var0 = curve.multiplication(x6_array[i + 1], proof.c_B[i])
            ver = curve.addition(ver, var0)
        if ped != ver:
            logger.debug("multi-exponent: commitment to b rejected")
            verification = False

        c_beta = restore(proof.c_beta, self.m, ShortPoint.infinity())
        ped = self.pedersen.commit_vector_vector(
            [proof.beta_tilde], [proof.r_beta_tilde])[0]
        ver = curve.sum(curve.multiplication(x6_array[k], c_beta[k])
                        for k in range(2 * self.m))
        if ped != ver:
            logger.debug("multi-exponent: commitment to beta rejected")
            verification = False

        # statement: sum(x^i * C_i) over the input ciphers
        x2_array = powers(self.x2, self.N, q)
        target = cipher_inner_product(x2_array[1:], self.ciphers_in, curve)
        E = restore(proof.E, self.m, target)

        e1 = E[0]
        for k in range(1, 2 * self.m):
            e1 = add_cipher(e1, mul_cipher(x6_array[k], E[k], curve), curve)

        # Enc_pk(G*beta_tilde; tau) + sum(C'_i * (x^(m-i) * b))
        scalars = []
        for i in range(self.m):
            scalars.extend((proof.b[j] * x6_array[self.m - i - 1]) % q
                           for j in range(self.n))
        e2 = add_cipher(enc_value(curve, self.pubKey, proof.beta_tilde,
                                  proof.tau),
                        cipher_inner_product(scalars, self.ciphers_out,
                                             curve), curve)
        if e1 != e2:
            logger.debug("multi-exponent: ciphers rejected")
            verification = False

        return verification

    def r4_verify_single_value_product(self, proof):
        """Verify the single value argument for the last row of G with
        target prod(y4*i + x2^i - z4) for i = 1, ... , N

        Args:
            proof (ShuffleProof): shuffle proof

        Returns:
            bool: True if verification successful, False else
        """
        q = self.order
        curve = self.curve
        gamma_tilde = proof.gamma_tilde
        alpha_tilde = proof.alpha_tilde
        verification = True

        if gamma_tilde[0] != alpha_tilde[0]:
            verification = False

        var_x = 1
        g = 1
        for i in range(1, self.N+1):
            var_x = (var_x * self.x2) % q
            g = (g * (var_x + i * self.y4 - self.z4)) % q

        if alpha_tilde[self.n - 1] != (g * self.x6) % q:
            verification = False

        ped = self.pedersen.commit_vector_value(gamma_tilde,
                                                proof.r_gamma_tilde)
        ver = curve.addition(curve.multiplication(self.x6,
                                                  self.c_G[self.m - 1]),
                             proof.c_gamma)
        if ped != ver:
            verification = False

        var0 = [(self.x6 * alpha_tilde[i + 1]
                 - alpha_tilde[i] * gamma_tilde[i + 1]) % q
                for i in range(self.n - 1)]
        ped = self.pedersen.commit_vector_value(var0, proof.r_alpha_tilde)
        ver = curve.addition(curve.multiplication(self.x6, proof.c_Delta),
                             proof.c_delta)
        if ped != ver:
            verification = False

        if not verification:
            logger.debug("single value product argument rejected")
        return verification

    def r6_verify_hadamard_zero(self, proof):
        """Verify sum(c_F*x^i) = com_ck(f;r_f) for i  = 0, ... ,m
        Verify sum(c_H*x^(m-j)) = com_ck(h;t_h) for j = 0, ...,m
        Verify sum(c_P*x^k) = com_ck(bilinearmap(f,h);t_p) for k = 0, ... ,2m
        with c_P(m+1) = com(0; 0)

        Args:
            proof (ShuffleProof): shuffle proof

        Returns:
            bool: True if verification successful, False else
        """
        q = self.order
        curve = self.curve
        m = self.m
        x8_array = powers(self.x8, 2 * m, q)
        x6_array = powers(self.x6, m, q)
        verification = True

        # c_F: {c_F_0, c_F(2), ... , c_F(m), com(-1; 0)}
        c_minus_one = self.pedersen.commit_vector_value([q - 1] * self.n, 0)
        c_F = [proof.c_F_0] + self.c_F[1:] + [c_minus_one]
        ver_c_f = curve.sum(curve.multiplication(x8_array[i], c_F[i])
                            for i in range(m + 1))
        if ver_c_f != self.pedersen.commit_vector_value(proof.f, proof.r_f):
            logger.debug("zero argument: commitment to f rejected")
            verification = False

        # c_H: {c_G(1)*x, ... , c_G(m-1)*x^(m-1), sum(c_G(i+1)*x^i), c_H_m}
        c_H = [curve.multiplication(x6_array[i + 1], self.c_G[i])
               for i in range(m - 1)]
        c_H.append(curve.sum(curve.multiplication(x6_array[i + 1],
                                                  self.c_G[i + 1])
                             for i in range(m - 1)))
        c_H.append(proof.c_H_m)
        ver_c_h = curve.sum(curve.multiplication(x8_array[m - j], c_H[j])
                            for j in range(m + 1))
        if ver_c_h != self.pedersen.commit_vector_value(proof.h, proof.r_h):
            logger.debug("zero argument: commitment to h rejected")
            verification = False

        c_P = restore(proof.c_P, m + 1, ShortPoint.infinity())
        ver_c_p = curve.sum(curve.multiplication(x8_array[k], c_P[k])
                            for k in range(2 * m + 1))
        var0 = bilinearmap(proof.f, proof.h, self.y6, q)
        ped_c_p = self.pedersen.commit_vector_vector([var0], [proof.r_p])
        if ver_c_p != ped_c_p[0]:
            logger.debug("zero argument: bilinear map rejected")
            verification = False

        return verification

    def nizk_verifier(self, proof):
        """Verification non-interactive Zero-Knowledge Argument for
        Correctness of a Shuffle, challenges are derived from the
        transcript

        Args:
            proof (ShuffleProof): nizk proof

        Returns:
            bool, bool, bool: True if verification successful, False else
            for all three arguments: Multi-Exponent, Single Value, Hadamard
        """
        if not self.well_formed(proof):
            logger.debug("shuffle proof is malformed")
            return False, False, False

        curve = self.curve
        transcript = statement_transcript(self.params, self.pubKey,
                                          self.ciphers_in, self.ciphers_out)

        transcript.append_points(b"c_A", proof.c_A)
        self.x2 = transcript.challenge_scalar(b"x2")
        transcript.append_points(b"c_B", proof.c_B)
        self.y4, self.z4 = transcript.challenge_scalars(b"y4z4", 2)
        absorb_round5(transcript, proof.c_G, proof.c_B0, proof.c_beta,
                      proof.E, proof.c_gamma, proof.c_delta, proof.c_Delta)
        self.x6, self.y6 = transcript.challenge_scalars(b"x6y6", 2)
        absorb_round7(transcript, proof.c_F_0, proof.c_H_m, proof.c_P)
        self.x8 = transcript.challenge_scalar(b"x8")

        # c_F(i) = c_A(i)*y4 + c_B(i) - com(z4,...,z4; 0), c_G(1) = c_F(1)
        c_z = self.pedersen.commit_vector_value([self.z4] * self.n, 0)
        self.c_F = []
        for i in range(self.m):
            var0 = curve.multiplication(self.y4, proof.c_A[i])
            var1 = curve.subtraction(proof.c_B[i], c_z)
            self.c_F.append(curve.addition(var0, var1))
        self.c_G = [self.c_F[0]] + list(proof.c_G)

        verification1 = self.r4_verify_multi_exponent(proof)
        verification2 = self.r4_verify_single_value_product(proof)
        verification3 = self.r6_verify_hadamard_zero(proof)

        return verification1, verification2, verification3


class Pedersen:
    """Pedersen commitment: com_ck(a_1,...,a_n;r) = g_1*a_1+...+g_n*a_n+h*r
    with randomness r

    Attributes:
        Curve (Curve): elliptic curve
        gen_G_Curve (List[ShortPoint]): generators g_1,...g_n
        gen_H_Curve (ShortPoint): generator h
    """
    def __init__(self, gen, n, Curve):
        """
        Args:
            gen (List[ShortPoint]): generators for pedersen commitment
            n (int): columns of shuffle argument
            Curve (Curve): elliptic curve
        """
        self.Curve = Curve

        self.gen_G_Curve = gen[0:n]
        self.gen_H_Curve = gen[n]

    def commit_vector_value(self, a_v, r):
        """Commit to up to n values in a_v with randomness r

        Args:
            a_v (List[int]): elements to for commitment
            r (int): randomness

        Returns:
            ShortPoint: commitment
        """
        assert len(a_v) <= len(self.gen_G_Curve)
        var0 = self.Curve.multiplication(r, self.gen_H_Curve)
        for i in range(len(a_v)):
            var1 = self.Curve.multiplication(a_v[i], self.gen_G_Curve[i])
            var0 = self.Curve.addition(var0, var1)

        return var0

    def commit_matrix_vector(self, A_v, r_v):
        """Commit to the rows of A_v with randomness r_v

        Args:
            A_v (List[List[int]]): vectors with element for commitment
            r_v (List[int]): randomness values

        Returns:
            List[ShortPoint]: one commitment per row
        """
        assert len(A_v) <= len(r_v)
        return [self.commit_vector_value(A_v[i], r_v[i])
                for i in range(len(A_v))]

    def commit_vector_vector(self, p, t_p):
        """Commitment: com_ck(p[i],0,...,0; t_p[i])

        Args:
            p (List[int]): values for commitment
            t_p (List[int]): randomness for commitment

        Returns:
            List[ShortPoint]: len(p) == len(t_p) commitments
        """
        assert len(p) == len(t_p)
        return [self.commit_vector_value([p[i]], t_p[i])
                for i in range(len(p))]


def statement_transcript(params, pk, ciphers_in, ciphers_out):
    """Transcript bound to the parameters and the shuffle statement"""
    transcript = Transcript(params.curve, b"bayer-groth-shuffle")
    transcript.append_message(b"m", params.m.to_bytes(4, "big"))
    transcript.append_message(b"n", params.n.to_bytes(4, "big"))
    transcript.append_point(b"generator", params.curve.generator)
    transcript.append_points(b"ck", params.commitment_generators)
    transcript.append_point(b"pk", pk)
    transcript.append_ciphers(b"ciphers_in", ciphers_in)
    transcript.append_ciphers(b"ciphers_out", ciphers_out)
    return transcript


def absorb_round5(transcript, c_G, c_B0, c_beta, E, c_gamma, c_delta,
                  c_Delta):
    transcript.append_points(b"c_G", c_G)
    transcript.append_point(b"c_B0", c_B0)
    transcript.append_points(b"c_beta", c_beta)
    transcript.append_ciphers(b"E", E)
    transcript.append_point(b"c_gamma", c_gamma)
    transcript.append_point(b"c_delta", c_delta)
    transcript.append_point(b"c_Delta", c_Delta)


def absorb_round7(transcript, c_F_0, c_H_m, c_P):
    transcript.append_point(b"c_F_0", c_F_0)
    transcript.append_point(b"c_H_m", c_H_m)
    transcript.append_points(b"c_P", c_P)


def drop(values, index):
    """Copy of values without values[index]"""
    return list(values[:index]) + list(values[index + 1:])


def restore(values, index, value):
    """Inverse of drop"""
    return list(values[:index]) + [value] + list(values[index:])


def enc_value(curve, pk, beta, tau):
    """ElGamal encryption of beta*G with randomness tau

    Returns:
        [ShortPoint, ShortPoint]: (tau*G, beta*G + tau*pk)
    """
    enc_a = curve.multiplication(tau, curve.generator)
    enc_b = curve.addition(curve.multiplication(beta, curve.generator),
                           curve.multiplication(tau, pk))
    return [enc_a, enc_b]


def mul_cipher(a, b, curve):
    """Multiply cipher with integer
    Args:
        a (int): integer
        b ([ShortPoint, ShortPoint]): cipher
        curve (Curve): elliptic curve

    Returns:
        [ShortPoint, ShortPoint]: multiplied cipher
    """
    var0 = curve.multiplication(a, b[0])
    var1 = curve.multiplication(a, b[1])

    return [var0, var1]


def add_cipher(a, b, curve):
    """Add two ciphers
    Args:
        a ([ShortPoint, ShortPoint]): cipher
        b ([ShortPoint, ShortPoint]): cipher
        curve (Curve): elliptic curve

    Returns:
        [ShortPoint, ShortPoint]: added cipher
    """
    var0 = curve.addition(b[0], a[0])
    var1 = curve.addition(b[1], a[1])

    return [var0, var1]


def cipher_inner_product(scalars, ciphers, curve):
    """sum(scalars[i] * ciphers[i])"""
    var0 = [ShortPoint.infinity(), ShortPoint.infinity()]
    for k, cipher in zip(scalars, ciphers):
        var0 = add_cipher(var0, mul_cipher(k, cipher, curve), curve)
    return var0


def powers(x, k, order):
    """[1, x, x^2, ... , x^k] mod order"""
    var0 = [1]
    for _ in range(k):
        var0.append((var0[-1] * x) % order)
    return var0


def hadamard(A, m, n, order):
    """Calculate Hadamard product: b_0 = A[0], b_1 = A[0]*A[1],...,
    b_m = A[0]*A[1]*...*A[m]

    Args:
        A (List[List[int]]): Matrix with n*m elements
        m (int): rows
        n (int): columns
        order (int): order of elliptic curve subgroup

    Returns:
        List[List[int]]: Hadamard product
    """
    var0 = [list(A[0])]
    for i in range(1, m):
        var0.append([(A[i][j] * var0[i - 1][j]) % order for j in range(n)])

    return var0


def bilinearmap(f, h, y, order):
    """Bilinear map: a = sum_{j=1}^{n}(f_j*h_j*y^j)

    Args:
        f (List[int]): list 1
        h (List[int]): list 2
        y (int): challenge
        order (int): order of elliptic curve subgroup

    Returns:
        int: solution from bilinear map
    """
    n = len(f)
    assert (n == len(h))

    var0 = 0
    var1 = 1
    for j in range(n):
        var1 = (var1 * y) % order
        var0 += f[j] * h[j] * var1

    return var0 % order
