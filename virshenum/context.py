# -*- coding: utf-8 -*-
#
# This file is part of libvirt-enum.
#
# libvirt-enum is free software: you can redistribute it and/or modify it under the terms of the
# GNU General Public License as published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# libvirt-enum is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without
# even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with libvirt-enum.  If
# not, see <http://www.gnu.org/licenses/>.

from contextlib import contextmanager

from virshenum import settings


@contextmanager
def setting(**kwargs):
    old = {}
    for k, v in kwargs.items():
        old[k] = getattr(settings, k, None)
        setattr(settings, k, v)

    try:
        yield
    finally:
        for k, v in old.items():
            setattr(settings, k, v)
