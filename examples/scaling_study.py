import numpy as np
import matplotlib.pyplot as plt
import pyfastresize as pfr

# Any PNG/JPEG works; a synthetic image keeps the script self-contained
rng = np.random.default_rng(0)
img = pfr.PixelBuffer.from_array(rng.integers(0, 256, size=(480, 640, 3), dtype=np.uint8))
# img = pfr.io.load_image('test_1.png')

# Backends must agree before timing means anything
seq = pfr.resize(img, 896, 896, 'bilinear', 'seq')
par = pfr.resize(img, 896, 896, 'bilinear', 'par', threads=8)
d = pfr.validate.compare_images(seq, par)
print(f"different_values = {d.different_values}, max_abs_diff = {d.max_abs_diff}")

# Strong scaling at a fixed output size
threads = [1, 2, 4, 8]
t_seq = pfr.bench.benchmark_resize(img, 1920, 1080, 'bilinear', 'seq', warmup=1, runs=5).mean_ms
t_par = []
for n in threads:
	r = pfr.bench.benchmark_resize(img, 1920, 1080, 'bilinear', 'par', threads=n, warmup=1, runs=5)
	t_par.append(r.mean_ms)
	print(f"{n:2d} threads: {r.mean_ms:8.2f} ms  (speedup {t_seq / r.mean_ms:.2f}x)")

plt.plot(threads, t_seq / np.array(t_par), 'o-', label='measured')
plt.plot(threads, threads, 'k--', label='ideal')
plt.xlabel('threads')
plt.ylabel('speedup vs sequential')
plt.legend()
plt.show()

# How much does each down/up pair destroy?
for down in ('nearest', 'bilinear'):
	for up in ('nearest', 'bilinear'):
		m = pfr.validate.down_up_metrics(img, 160, 120, down, up)
		print(f"{down:>8} -> {up:<8}: mae={m.mae:6.2f} rmse={m.rmse:6.2f} psnr={m.psnr:6.2f} dB")
